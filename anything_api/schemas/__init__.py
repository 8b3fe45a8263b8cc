"""
Public Pydantic schemas used by FastAPI routes, services, and tests.

Schemas are grouped by domain module (catalog, inventory, auth) and also
include common reusable models such as the error envelope. JSON field names
are camelCase.
"""

from .common import ErrorResponse, MessageResponse  # noqa: F401
