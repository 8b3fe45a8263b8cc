"""
ORM models for the resource collections and for authentication.

Importing this package ensures model classes are registered with the Base
metadata for Alembic and runtime usage.
"""

from .catalog import (  # noqa: F401
    Something,
    StorageUnit,
    Box,
    Item,
)
from .inventory import (  # noqa: F401
    InventoryStorageUnit,
    InventoryBox,
    InventoryItem,
)
from .security import (  # noqa: F401
    User,
    RefreshToken,
    UserInvite,
)
