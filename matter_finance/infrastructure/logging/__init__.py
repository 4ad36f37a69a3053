"""Logging helpers for the application."""
