"""Billing summary projection for legal matters."""
