import pytest

from bank_api.app.schemas.account import Account
from bank_api.app.schemas.branch import Branch
from bank_api.app.services.entity_kinds import ACCOUNT, BRANCH
from bank_api.app.services.errors import InvalidInput, NotFound
from bank_api.app.services.record_store import open_record_store


def test_load_empty(branch_store):
    assert branch_store.load() == []
    assert len(branch_store) == 0


def test_insert_assigns_identifier_and_ticket(branch_store):
    stored = branch_store.add_or_update(Branch(name="Downtown", city="Springfield"))
    assert stored.branch_id == 1
    assert stored.branch_ticket is not None
    assert stored.city == "Springfield"
    assert branch_store.find(1) == stored
    assert list(branch_store) == [stored]


def test_payload_with_unknown_identifier_is_inserted_under_new_identifier(branch_store):
    branch_store.add_or_update(Branch(name="First"))
    stored = branch_store.add_or_update(Branch(branch_id=50, name="Second"))
    assert stored.branch_id == 2
    assert branch_store.find(50) is None


def test_update_overwrites_and_keeps_ticket(branch_store):
    created = branch_store.add_or_update(Branch(name="Downtown"))
    updated = branch_store.add_or_update(Branch(branch_id=created.branch_id, name="Uptown"))
    assert updated.branch_id == created.branch_id
    assert updated.name == "Uptown"
    assert updated.branch_ticket == created.branch_ticket
    assert len(branch_store) == 1
    assert branch_store.find(created.branch_id).name == "Uptown"


def test_remove(branch_store):
    stored = branch_store.add_or_update(Branch(name="Downtown"))
    branch_store.remove(stored)
    assert branch_store.find(stored.branch_id) is None
    assert not branch_store.exists(stored.branch_id)
    assert branch_store.load() == []


def test_saved_changes_are_visible_to_other_connections(database):
    with open_record_store(BRANCH) as store:
        stored = store.add_or_update(Branch(name="Downtown"))
        store.save_changes()
    with open_record_store(BRANCH) as store:
        assert store.load() == [stored]


def test_unsaved_changes_are_rolled_back_on_close(database):
    with open_record_store(BRANCH) as store:
        store.add_or_update(Branch(name="Downtown"))
    with open_record_store(BRANCH) as store:
        assert store.load() == []


def test_exists_asks_the_database_not_the_cache(branch_store, add_branch):
    branch_store.load()
    added = add_branch("North")
    assert branch_store.find(added.branch_id) is None
    assert branch_store.exists(added.branch_id)
    assert not branch_store.exists(None)


def test_dangling_reference_is_invalid_input(database):
    with open_record_store(ACCOUNT) as store:
        with pytest.raises(InvalidInput):
            store.add_or_update(Account(branch_id=999))


def test_load_orders_by_identifier(branch_store, add_branch):
    for name in ("C", "A", "B"):
        add_branch(name)
    assert [branch.name for branch in branch_store.load()] == ["C", "A", "B"]
    assert [branch.branch_id for branch in branch_store] == [1, 2, 3]


def test_update_never_inserts(branch_store):
    with pytest.raises(NotFound):
        branch_store.update(Branch(branch_id=7, name="Ghost"))
    assert branch_store.load() == []


def test_update_replaces_cached_record(branch_store):
    created = branch_store.add_or_update(Branch(name="Downtown"))
    updated = branch_store.update(created.model_copy(update={"name": "Uptown"}))
    assert updated.branch_ticket == created.branch_ticket
    assert list(branch_store) == [updated]


def test_identifier_too_large_for_sqlite_is_invalid_input(branch_store):
    # Bypasses validation, which already bounds identifiers.
    oversized = Branch.model_construct(branch_id=2**63, name="Huge")
    with pytest.raises(InvalidInput):
        branch_store.add_or_update(oversized)
