"""Domain type definitions for tripcal.

These NewTypes provide semantic clarity and help with type checking:
- DateKey: Calendar day in zero-padded YYYY-MM-DD format
- PropertyId: Backend identifier of a property
- UserId: Backend identifier of a user
"""

from typing import NewType

# DateKey is always YYYY-MM-DD (e.g., "2025-06-15"), so string order is date order
DateKey = NewType("DateKey", str)

# Property identifier as issued by the backend
PropertyId = NewType("PropertyId", str)

# User identifier as issued by the backend
UserId = NewType("UserId", str)
