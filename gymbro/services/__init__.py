"""Services package for the GymBro matching service."""

from gymbro.services.candidate_selector import CandidateSelector
from gymbro.services.match_detector import MatchDetector
from gymbro.services.matching_service import MatchingService
from gymbro.services.profile_store import ProfileStore
from gymbro.services.repository import SnapshotRepository, seed_snapshot
from gymbro.services.swipe_ledger import SwipeLedger

__all__ = [
    "CandidateSelector",
    "MatchDetector",
    "MatchingService",
    "ProfileStore",
    "SnapshotRepository",
    "SwipeLedger",
    "seed_snapshot",
]
