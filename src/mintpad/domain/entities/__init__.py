"""Domain entities for Mintpad.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from mintpad.domain.entities.auth_context import AuthContext
from mintpad.domain.entities.collection import (
    Collection,
    CollectionStatus,
    LaunchStatus,
)
from mintpad.domain.entities.phase import Phase
from mintpad.domain.entities.whitelist import Whitelist, normalize_address

__all__ = [
    "AuthContext",
    "Collection",
    "CollectionStatus",
    "LaunchStatus",
    "Phase",
    "Whitelist",
    "normalize_address",
]
