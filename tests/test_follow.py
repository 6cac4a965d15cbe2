from nbd_api.db.models import Follow
from tests.conftest import auth_headers, make_follow, make_user


def test_follow_and_unfollow(client, db):
    alice = make_user(db, "alice")
    make_user(db, "bob")
    headers = auth_headers(alice)

    response = client.post("/api/follow/bob", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"message": "You are now following bob", "following": True}
    assert client.get("/api/follow/bob", headers=headers).json()["following"] is True

    response = client.delete("/api/follow/bob", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"message": "You are no longer following bob", "following": False}
    assert db.query(Follow).count() == 0


def test_follow_requires_session(client, db):
    make_user(db, "bob")
    assert client.post("/api/follow/bob").status_code == 401
    assert client.delete("/api/follow/bob").status_code == 401


def test_follow_unknown_user(client, db):
    alice = make_user(db, "alice")
    response = client.post("/api/follow/ghost", headers=auth_headers(alice))
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_cannot_follow_self(client, db):
    alice = make_user(db, "alice")
    response = client.post("/api/follow/alice", headers=auth_headers(alice))
    assert response.status_code == 400
    assert response.json() == {"error": "You cannot follow yourself"}


def test_follow_edge_is_unique(client, db):
    alice = make_user(db, "alice")
    bob = make_user(db, "bob")
    make_follow(db, alice, bob)

    response = client.post("/api/follow/bob", headers=auth_headers(alice))
    assert response.status_code == 400
    assert response.json() == {"error": "You are already following this user"}
    assert db.query(Follow).count() == 1


def test_unfollow_when_not_following(client, db):
    alice = make_user(db, "alice")
    make_user(db, "bob")
    response = client.delete("/api/follow/bob", headers=auth_headers(alice))
    assert response.status_code == 400
    assert response.json() == {"error": "You are not following this user"}


def test_follow_status_for_anonymous(client, db):
    make_user(db, "bob")
    assert client.get("/api/follow/bob").json() == {"message": None, "following": False}
