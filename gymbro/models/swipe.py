"""Swipe models for the GymBro matching service."""

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gymbro.models.match import MatchRecord
from gymbro.utils.helpers import now_ms


class SwipeRecord(BaseModel):
    """
    A single like/pass decision by one user about another.

    The ledger keeps at most one record per ordered `(actor_id, target_id)` pair.
    """

    actor_id: int = Field(..., gt=0, alias="swiperId")
    target_id: int = Field(..., gt=0, alias="targetId")
    is_like: bool = Field(..., alias="isLike")
    timestamp: int = Field(default_factory=now_ms, description="Unix epoch milliseconds.")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="after")
    def check_self_swipe(self) -> "SwipeRecord":
        if self.actor_id == self.target_id:
            raise ValueError("Swiper and target cannot be the same user.")
        return self

    @property
    def key(self) -> Tuple[int, int]:
        """Ordered pair identifying this record in the ledger."""
        return (self.actor_id, self.target_id)


class SwipeRequest(BaseModel):
    """Inbound swipe decision."""

    actor_id: int = Field(..., alias="swiperId", strict=True)
    target_id: int = Field(..., alias="targetId", strict=True)
    is_like: bool = Field(..., alias="isLike")

    model_config = ConfigDict(populate_by_name=True)


class SwipeResult(BaseModel):
    """Outcome of a swipe, as returned to the caller."""

    success: bool = True
    is_match: bool = Field(default=False, alias="isMatch")
    match: Optional[MatchRecord] = None

    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
