"""Per-test fixtures and suite-wide setup and teardown.

Run with:
    tdd-run examples/setup_examples.py
"""

import sys

from tdd import confirm, run_tests, setup_and_teardown, suite_class, test

_entries: dict[int, str] = {}


def create_test_entry() -> int:
    # Real code might insert a row and return its identifier.
    entry_id = len(_entries) + 100
    _entries[entry_id] = "entry"
    return entry_id


def update_test_entry_name(entry_id: int, name: str) -> None:
    if not name:
        raise ValueError("name must not be empty")
    _entries[entry_id] = name


def delete_test_entry(entry_id: int) -> None:
    _entries.pop(entry_id, None)


class TempEntry:
    def __init__(self) -> None:
        self.id = -1

    def setup(self) -> None:
        self.id = create_test_entry()

    def teardown(self) -> None:
        delete_test_entry(self.id)


@test("Test will run setup and teardown code", raises=ValueError)
def _():
    with setup_and_teardown(TempEntry) as entry:
        update_test_entry_name(entry.id, "")


@suite_class("Shared entry", "Entries")
class SharedEntry(TempEntry):
    pass


@test("Shared entry exists", "Entries")
def _():
    confirm("entry", _entries[SharedEntry.suite_instance.id])


@test("Shared entry can be renamed", "Entries")
def _():
    entry_id = SharedEntry.suite_instance.id
    update_test_entry_name(entry_id, "renamed")
    confirm("renamed", _entries[entry_id])


if __name__ == "__main__":
    sys.exit(run_tests())
