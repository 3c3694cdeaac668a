"""CLI commands, discovered by toastwrap.cli."""
