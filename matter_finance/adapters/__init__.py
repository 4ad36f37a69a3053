"""Entry-point adapters (CLI and user interfaces)."""
