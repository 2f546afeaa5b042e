"""Tests for the Snapshot model."""

import json

from gymbro.models.snapshot import Snapshot


class TestSnapshot:
    """Tests for Snapshot."""

    def test_accepts_legacy_users_key(self):
        snapshot = Snapshot.model_validate({"users": [{"id": 1}, {"id": 2}], "swipes": [], "matches": []})
        assert [p.id for p in snapshot.profiles] == [1, 2]

    def test_null_arrays_become_empty(self):
        snapshot = Snapshot.model_validate_json('{"users": [{"id": 1}], "swipes": null, "matches": null}')
        assert snapshot.swipes == []
        assert snapshot.matches == []

    def test_missing_arrays_default_to_empty(self):
        snapshot = Snapshot.model_validate({})
        assert snapshot.profiles == []
        assert snapshot.swipes == []
        assert snapshot.matches == []

    def test_to_json_uses_profiles_key_and_aliases(self):
        snapshot = Snapshot.model_validate(
            {
                "users": [{"id": 1, "imageUrl": "/a.jpg"}, {"id": 2}],
                "swipes": [{"swiperId": 1, "targetId": 2, "isLike": True, "timestamp": 3}],
                "matches": [{"user1Id": 2, "user2Id": 1, "timestamp": 4}],
            }
        )
        data = json.loads(snapshot.to_json())
        assert set(data) == {"profiles", "swipes", "matches"}
        assert data["profiles"][0]["imageUrl"] == "/a.jpg"
        assert data["swipes"] == [{"swiperId": 1, "targetId": 2, "isLike": True, "timestamp": 3}]
        assert data["matches"] == [{"user1Id": 1, "user2Id": 2, "timestamp": 4}]
