"""CLI commands for whatsup."""
