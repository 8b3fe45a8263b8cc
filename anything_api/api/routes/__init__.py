"""
API route modules.

This package contains subrouters for:
- Auth: login, refresh, register, invites, profile, current user, logout
- Catalog: somethings, storage units, boxes, items
- Inventory: inventory storage units, boxes, items

Routers are included from anything_api.api.main.
"""
