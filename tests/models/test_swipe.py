"""Tests for swipe models."""

import pydantic
import pytest

from gymbro.models.match import MatchRecord
from gymbro.models.swipe import SwipeRecord, SwipeRequest, SwipeResult


class TestSwipeRecord:
    """Tests for SwipeRecord."""

    def test_accepts_wire_names(self):
        record = SwipeRecord.model_validate({"swiperId": 1, "targetId": 2, "isLike": True, "timestamp": 10})
        assert record.actor_id == 1
        assert record.target_id == 2
        assert record.is_like is True
        assert record.key == (1, 2)

    def test_rejects_self_swipe(self):
        with pytest.raises(pydantic.ValidationError):
            SwipeRecord(actor_id=3, target_id=3, is_like=True)

    def test_rejects_non_positive_ids(self):
        with pytest.raises(pydantic.ValidationError):
            SwipeRecord(actor_id=0, target_id=3, is_like=True)

    def test_timestamp_defaults_to_now(self):
        record = SwipeRecord(actor_id=1, target_id=2, is_like=False)
        assert record.timestamp > 0

    def test_is_frozen(self):
        record = SwipeRecord(actor_id=1, target_id=2, is_like=False)
        with pytest.raises(pydantic.ValidationError):
            record.is_like = True


class TestSwipeWireModels:
    """Tests for the request/response payloads."""

    def test_request_from_wire(self):
        request = SwipeRequest.model_validate({"swiperId": 4, "targetId": 5, "isLike": False})
        assert (request.actor_id, request.target_id, request.is_like) == (4, 5, False)

    @pytest.mark.parametrize("field", ["swiperId", "targetId"])
    @pytest.mark.parametrize("bad_id", [True, 1.0, "1"])
    def test_request_ids_must_be_integers(self, field, bad_id):
        payload = {"swiperId": 4, "targetId": 5, "isLike": True, field: bad_id}
        with pytest.raises(pydantic.ValidationError):
            SwipeRequest.model_validate(payload)

    def test_result_without_match(self):
        assert SwipeResult().to_wire() == {"success": True, "isMatch": False, "match": None}

    def test_result_with_match(self):
        result = SwipeResult(is_match=True, match=MatchRecord(user1_id=1, user2_id=2, timestamp=7))
        assert result.to_wire() == {
            "success": True,
            "isMatch": True,
            "match": {"user1Id": 1, "user2Id": 2, "timestamp": 7},
        }
