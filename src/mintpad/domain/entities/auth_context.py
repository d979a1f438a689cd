"""Authentication context passed explicitly into core operations.

Signature verification happens before the core is called; by the time an
AuthContext exists, ``wallet_address`` has already been proven by the
caller. The core only decides what that wallet may do.
"""

from dataclasses import dataclass

from mintpad.domain.entities.collection import Collection
from mintpad.domain.entities.whitelist import normalize_address


@dataclass(frozen=True)
class AuthContext:
    """Who is calling.

    Attributes:
        wallet_address: Verified wallet address, None for anonymous callers.
        is_admin: Whether the wallet holds the platform admin role.
    """

    wallet_address: str | None = None
    is_admin: bool = False

    @classmethod
    def anonymous(cls) -> "AuthContext":
        return cls()

    @property
    def is_authenticated(self) -> bool:
        return bool(self.wallet_address)

    def is_owner(self, collection: Collection) -> bool:
        if not self.wallet_address:
            return False
        return normalize_address(self.wallet_address) == normalize_address(collection.owner_wallet)

    def can_manage(self, collection: Collection) -> bool:
        """Owners, accepted collaborators and admins may manage a collection."""
        if self.is_admin:
            return True
        if not self.wallet_address:
            return False
        if self.is_owner(collection):
            return True
        wallet = normalize_address(self.wallet_address)
        return any(normalize_address(c) == wallet for c in collection.collaborators)
