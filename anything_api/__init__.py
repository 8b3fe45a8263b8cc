"""Anything API: inventory backend service."""
