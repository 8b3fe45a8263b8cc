"""
Core application utilities for settings and FastAPI dependencies.

This package provides:
- Application-level settings (separate from DB settings)
- JWT/password helpers and the current-user dependencies
- Logging configuration and domain error types
"""
