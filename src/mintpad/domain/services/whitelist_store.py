"""Whitelist membership oracle.

The core consumes whitelists only through the WhitelistStore protocol:
membership, entry counts and lookup by ID. InMemoryWhitelistStore is the
reference implementation used by the HTTP layer (which rebuilds it from the
request payload) and by tests; a persistent store only has to provide the
same read methods.
"""

import dataclasses
from collections.abc import Iterable
from typing import Protocol

from mintpad.core.logging import get_logger
from mintpad.domain.entities.phase import Phase
from mintpad.domain.entities.whitelist import Whitelist, normalize_address

logger = get_logger(__name__)


class WhitelistNotFoundError(LookupError):
    """Raised when a mutating operation targets a missing whitelist."""


class WhitelistStore(Protocol):
    """Read contract used by the validator, scheduler and mint gate."""

    def get(self, whitelist_id: str) -> Whitelist | None: ...

    def is_eligible(self, whitelist_id: str, address: str) -> bool: ...

    def entry_count(self, whitelist_id: str) -> int: ...


def detach_whitelist(phases: Iterable[Phase], whitelist_id: str) -> list[Phase]:
    """Clear references to a deleted whitelist.

    Every phase pointing at ``whitelist_id`` gets ``whitelist_id = None`` and
    ``whitelist_only = False``. Other phases are returned unchanged.
    """
    updated: list[Phase] = []
    for phase in phases:
        if phase.whitelist_id == whitelist_id:
            phase = dataclasses.replace(phase, whitelist_id=None, whitelist_only=False)
        updated.append(phase)
    return updated


class InMemoryWhitelistStore:
    """Dictionary-backed WhitelistStore."""

    def __init__(self, whitelists: Iterable[Whitelist] = ()) -> None:
        # Entries are copied so mutations never reach the caller's objects
        self._whitelists: dict[str, Whitelist] = {
            w.id: dataclasses.replace(w, entries=list(w.entries)) for w in whitelists
        }

    def __len__(self) -> int:
        return len(self._whitelists)

    def get(self, whitelist_id: str) -> Whitelist | None:
        return self._whitelists.get(whitelist_id)

    def list_for_collection(self, collection_id: str) -> list[Whitelist]:
        return [w for w in self._whitelists.values() if w.collection_id == collection_id]

    def is_eligible(self, whitelist_id: str, address: str) -> bool:
        whitelist = self._whitelists.get(whitelist_id)
        if whitelist is None or not address:
            return False
        return address in whitelist

    def entry_count(self, whitelist_id: str) -> int:
        whitelist = self._whitelists.get(whitelist_id)
        return whitelist.entries_count if whitelist else 0

    def create(
        self,
        whitelist_id: str,
        collection_id: str,
        name: str,
        description: str | None = None,
        entries: Iterable[str] = (),
    ) -> Whitelist:
        """Create or replace a whitelist."""
        whitelist = Whitelist(
            id=whitelist_id,
            collection_id=collection_id,
            name=name,
            description=description,
            entries=list(entries),
        )
        self._whitelists[whitelist.id] = whitelist
        logger.info(
            "Whitelist created",
            whitelist_id=whitelist.id,
            collection_id=collection_id,
            entries_count=whitelist.entries_count,
        )
        return whitelist

    def add_entries(self, whitelist_id: str, addresses: Iterable[str]) -> int:
        """Add addresses, skipping blanks and duplicates.

        Returns:
            Number of addresses actually added.

        Raises:
            WhitelistNotFoundError: If the whitelist does not exist.
        """
        whitelist = self._require(whitelist_id)
        added = 0
        for address in addresses:
            normalized = normalize_address(address)
            if normalized and normalized not in whitelist.entries:
                whitelist.entries.append(normalized)
                added += 1
        logger.debug("Whitelist entries added", whitelist_id=whitelist_id, added=added)
        return added

    def remove_entry(self, whitelist_id: str, address: str) -> bool:
        """Remove a single address. Returns False if it was not listed."""
        whitelist = self._require(whitelist_id)
        normalized = normalize_address(address)
        if normalized not in whitelist.entries:
            return False
        whitelist.entries.remove(normalized)
        return True

    def delete(self, whitelist_id: str, phases: Iterable[Phase] = ()) -> list[Phase]:
        """Delete a whitelist and detach it from the given phases.

        Returns:
            The phases with references to the whitelist cleared.

        Raises:
            WhitelistNotFoundError: If the whitelist does not exist.
        """
        self._require(whitelist_id)
        del self._whitelists[whitelist_id]
        updated = detach_whitelist(phases, whitelist_id)
        logger.info("Whitelist deleted", whitelist_id=whitelist_id)
        return updated

    def _require(self, whitelist_id: str) -> Whitelist:
        whitelist = self._whitelists.get(whitelist_id)
        if whitelist is None:
            raise WhitelistNotFoundError(f"Whitelist '{whitelist_id}' not found")
        return whitelist
