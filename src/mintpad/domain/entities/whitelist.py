"""Whitelist entity.

Whitelists are named, address-keyed eligibility lists owned by a collection
and attachable to any number of phases.
"""

from dataclasses import dataclass, field


def normalize_address(address: str) -> str:
    """Normalize a wallet address for storage and lookup."""
    return address.strip()


@dataclass
class Whitelist:
    """Whitelist entity.

    Attributes:
        id: Unique identifier.
        collection_id: Owning collection.
        name: Display name, required.
        description: Optional free text.
        entries: Wallet addresses in insertion order, unique.
    """

    id: str
    collection_id: str
    name: str
    description: str | None = None
    entries: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate whitelist data and drop duplicate entries."""
        if not self.id:
            raise ValueError("Whitelist ID is required")
        if not self.name or not self.name.strip():
            raise ValueError("Whitelist name is required")

        unique: list[str] = []
        seen: set[str] = set()
        for address in self.entries:
            normalized = normalize_address(address)
            if normalized and normalized not in seen:
                seen.add(normalized)
                unique.append(normalized)
        self.entries = unique

    def __contains__(self, address: object) -> bool:
        if not isinstance(address, str):
            return False
        return normalize_address(address) in self.entries

    @property
    def entries_count(self) -> int:
        return len(self.entries)
