"""Unit tests for the in-memory whitelist store."""

import pytest

from mintpad.domain.entities import Whitelist
from mintpad.domain.services import (
    InMemoryWhitelistStore,
    WhitelistNotFoundError,
    detach_whitelist,
)

MINTER = "bc1qminter00000000000000000000000000000000"


class TestMembership:
    def test_is_eligible(self, whitelists):
        assert whitelists.is_eligible("wl_1", MINTER)
        assert whitelists.is_eligible("wl_1", f"  {MINTER} ")
        assert not whitelists.is_eligible("wl_1", "bc1qnobody")
        assert not whitelists.is_eligible("wl_missing", MINTER)
        assert not whitelists.is_eligible("wl_1", "")

    def test_entry_count(self, whitelists):
        assert whitelists.entry_count("wl_1") == 1
        assert whitelists.entry_count("wl_empty") == 0
        assert whitelists.entry_count("wl_missing") == 0

    def test_list_for_collection(self, whitelists):
        assert {w.id for w in whitelists.list_for_collection("col_1")} == {"wl_1", "wl_empty"}


class TestMutation:
    def test_create_deduplicates(self):
        store = InMemoryWhitelistStore()
        whitelist = store.create("wl_new", "col_1", "Allow", entries=["a", "b", "a", " b "])
        assert whitelist.entries == ["a", "b"]
        assert len(store) == 1

    def test_add_entries_skips_blanks_and_duplicates(self, whitelists):
        added = whitelists.add_entries("wl_1", [MINTER, "", "bc1qnew", "bc1qnew"])
        assert added == 1
        assert whitelists.entry_count("wl_1") == 2

    def test_remove_entry(self, whitelists):
        assert whitelists.remove_entry("wl_1", MINTER) is True
        assert whitelists.remove_entry("wl_1", MINTER) is False
        assert not whitelists.is_eligible("wl_1", MINTER)

    def test_mutations_leave_caller_whitelist_untouched(self):
        original = Whitelist(id="wl_x", collection_id="col_1", name="OG", entries=[MINTER])
        store = InMemoryWhitelistStore([original])

        store.add_entries("wl_x", ["bc1qnew"])
        store.remove_entry("wl_x", MINTER)

        assert original.entries == [MINTER]
        assert store.get("wl_x").entries == ["bc1qnew"]

    def test_missing_whitelist(self, whitelists):
        with pytest.raises(WhitelistNotFoundError):
            whitelists.add_entries("wl_missing", ["x"])


class TestDelete:
    def test_delete_detaches_phases(self, whitelists, make_phase):
        phases = [
            make_phase(id="ph_1", whitelist_only=True, whitelist_id="wl_1"),
            make_phase(id="ph_2", whitelist_only=True, whitelist_id="wl_empty"),
            make_phase(id="ph_3"),
        ]

        updated = whitelists.delete("wl_1", phases)

        assert whitelists.get("wl_1") is None
        assert updated[0].whitelist_id is None
        assert updated[0].whitelist_only is False
        assert updated[1] is phases[1]
        assert updated[2] is phases[2]

    def test_no_phase_references_deleted_whitelist(self, whitelists, make_phase):
        phases = [make_phase(id=f"ph_{i}", whitelist_id="wl_1") for i in range(3)]
        updated = whitelists.delete("wl_1", phases)
        assert all(p.whitelist_id != "wl_1" for p in updated)

    def test_delete_missing(self, whitelists):
        with pytest.raises(WhitelistNotFoundError):
            whitelists.delete("wl_missing")

    def test_detach_leaves_input_unchanged(self, make_phase):
        phase = make_phase(whitelist_only=True, whitelist_id="wl_1")
        detach_whitelist([phase], "wl_1")
        assert phase.whitelist_id == "wl_1"
