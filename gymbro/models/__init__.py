"""Models package for the GymBro matching service."""

from gymbro.models.match import MatchKey, MatchRecord
from gymbro.models.profile import Profile, ProfileUpsert
from gymbro.models.snapshot import Snapshot
from gymbro.models.swipe import SwipeRecord, SwipeRequest, SwipeResult

__all__ = [
    "MatchKey",
    "MatchRecord",
    "Profile",
    "ProfileUpsert",
    "Snapshot",
    "SwipeRecord",
    "SwipeRequest",
    "SwipeResult",
]
