"""Match models for the GymBro matching service."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gymbro.utils.helpers import now_ms


def _canonical_pair(data: Any, first: str, second: str) -> Any:
    """Swap the two identifier fields of raw input so the smaller one comes first."""
    if not isinstance(data, dict):
        return data
    a, b = data.get(first), data.get(second)
    if isinstance(a, int) and isinstance(b, int) and a > b:
        data = dict(data)
        data[first], data[second] = b, a
    return data


class MatchKey(BaseModel):
    """
    Canonical unordered pair of two distinct user identifiers.

    Always normalised to `low < high` on construction, so `MatchKey.of(2, 1)`
    and `MatchKey.of(1, 2)` are equal and hash the same.
    """

    low: int = Field(..., gt=0)
    high: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def normalise_order(cls, data: Any) -> Any:
        return _canonical_pair(data, "low", "high")

    @model_validator(mode="after")
    def check_distinct(self) -> "MatchKey":
        if self.low == self.high:
            raise ValueError("A match needs two distinct users.")
        return self

    @classmethod
    def of(cls, a: int, b: int) -> "MatchKey":
        return cls(low=a, high=b)


class MatchRecord(BaseModel):
    """
    Match model.

    A confirmed mutual like between two users, stored in canonical order
    (`user1_id < user2_id`). Never mutated once created.
    """

    user1_id: int = Field(..., gt=0, alias="user1Id")
    user2_id: int = Field(..., gt=0, alias="user2Id")
    timestamp: int = Field(default_factory=now_ms, description="Unix epoch milliseconds.")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def normalise_order(cls, data: Any) -> Any:
        data = _canonical_pair(data, "user1_id", "user2_id")
        return _canonical_pair(data, "user1Id", "user2Id")

    @model_validator(mode="after")
    def check_distinct(self) -> "MatchRecord":
        if self.user1_id == self.user2_id:
            raise ValueError("A user cannot match with themselves.")
        return self

    @classmethod
    def for_key(cls, key: MatchKey, timestamp: int | None = None) -> "MatchRecord":
        if timestamp is None:
            return cls(user1_id=key.low, user2_id=key.high)
        return cls(user1_id=key.low, user2_id=key.high, timestamp=timestamp)

    @property
    def key(self) -> MatchKey:
        return MatchKey(low=self.user1_id, high=self.user2_id)

    def involves(self, user_id: int) -> bool:
        """Check whether `user_id` is one of the two matched users."""
        return user_id in (self.user1_id, self.user2_id)
