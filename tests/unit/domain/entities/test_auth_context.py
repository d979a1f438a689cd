"""Unit tests for AuthContext."""

from mintpad.domain.entities import AuthContext, Collection


def make_collection(**overrides):
    data = {"id": "col_1", "owner_wallet": "bc1qowner"}
    data.update(overrides)
    return Collection(**data)


def test_anonymous():
    auth = AuthContext.anonymous()
    assert not auth.is_authenticated
    assert not auth.can_manage(make_collection())


def test_owner_can_manage():
    auth = AuthContext(wallet_address=" bc1qowner")
    assert auth.is_owner(make_collection())
    assert auth.can_manage(make_collection())


def test_collaborator_can_manage_but_is_not_owner():
    auth = AuthContext(wallet_address="bc1qfriend")
    collection = make_collection(collaborators=["bc1qfriend"])
    assert not auth.is_owner(collection)
    assert auth.can_manage(collection)


def test_admin_can_manage_any_collection():
    assert AuthContext(wallet_address="bc1qadmin", is_admin=True).can_manage(make_collection())


def test_stranger_cannot_manage():
    assert not AuthContext(wallet_address="bc1qstranger").can_manage(make_collection())
