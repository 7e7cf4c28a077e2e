"""Async wrapper for Typer to support async commands."""

import asyncio
import inspect
from functools import wraps
from typing import Any, Callable

import typer


def _async_command_wrapper(f: Callable) -> Callable:
    """Wrap an async function to run synchronously with asyncio.run."""

    @wraps(f)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(f(*args, **kwargs))

    return sync_wrapper


class ATyper(typer.Typer):
    """Typer subclass with async command support."""

    def command(  # type: ignore
        self,
        name: str | None = None,
        **kwargs: Any,
    ) -> Any:
        """Register a command, running async functions in a fresh event loop."""

        def decorator(f: Callable) -> Callable:
            if inspect.iscoroutinefunction(f):
                f = _async_command_wrapper(f)
            return typer.Typer.command(self, name, **kwargs)(f)

        return decorator
