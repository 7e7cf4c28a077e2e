"""Command-line interface for whatsup."""

from __future__ import annotations

from whatsup.cli.app import ExitCode
from whatsup.cli.app import app
from whatsup.cli.app import run_app

__all__ = ["app", "run_app", "ExitCode"]
