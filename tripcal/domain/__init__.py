"""Domain models and types for tripcal.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Calendar and selection logic separated from the terminal and the network
"""

from tripcal.domain.models import DateKey, PropertyId, UserId

__all__ = ["DateKey", "PropertyId", "UserId"]
