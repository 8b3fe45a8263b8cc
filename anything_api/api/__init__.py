"""FastAPI application and route modules."""
