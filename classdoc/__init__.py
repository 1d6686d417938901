"""Markdown class-page generation from an already-parsed type model."""
