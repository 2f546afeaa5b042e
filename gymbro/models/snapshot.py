"""Snapshot model: the complete persisted state of the GymBro service."""

from typing import Any, List

from pydantic import AliasChoices, BaseModel, Field, field_validator

from gymbro.models.match import MatchRecord
from gymbro.models.profile import Profile
from gymbro.models.swipe import SwipeRecord


class Snapshot(BaseModel):
    """
    All profiles, swipes and matches at a point in time.

    Snapshot files written by older servers name the profile array `users`;
    both names are accepted on input and `profiles` is always written.
    """

    profiles: List[Profile] = Field(default_factory=list, validation_alias=AliasChoices("profiles", "users"))
    swipes: List[SwipeRecord] = Field(default_factory=list)
    matches: List[MatchRecord] = Field(default_factory=list)

    @field_validator("profiles", "swipes", "matches", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        # older snapshot files store empty arrays as null
        return [] if v is None else v

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
