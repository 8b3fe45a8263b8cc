"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries for each domain area. Resource
repositories only ever see live rows; soft-deleted rows are filtered out.
"""
