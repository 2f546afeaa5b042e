"""Matching service for the GymBro matching service.

Composes the profile store, swipe ledger, match detector and candidate
selector under one consistency boundary.

Writers are serialised by a single lock. Each write works on a deep copy of
the published snapshot, saves it, and only then publishes it by swapping one
reference, so a failed save leaves memory and disk unchanged. Published
snapshots are never mutated, which lets readers use them without the lock.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

import sentry_sdk

from gymbro.config import settings
from gymbro.models.match import MatchRecord
from gymbro.models.profile import Profile, ProfileUpsert
from gymbro.models.snapshot import Snapshot
from gymbro.models.swipe import SwipeResult
from gymbro.services.candidate_selector import CandidateSelector
from gymbro.services.match_detector import MatchDetector
from gymbro.services.profile_store import ProfileStore
from gymbro.services.repository import SnapshotRepository, seed_snapshot
from gymbro.services.swipe_ledger import SwipeLedger
from gymbro.utils.errors import CorruptDataError, NotFoundError, PersistenceError, ValidationError
from gymbro.utils.helpers import require_user_id
from gymbro.utils.logging import get_logger, log_error

logger = get_logger(__name__)


class MatchingService:
    """Orchestrates swipes, matches, candidates and profile upserts over one snapshot."""

    def __init__(
        self,
        repository: SnapshotRepository,
        snapshot: Optional[Snapshot] = None,
        default_image_url: Optional[str] = None,
    ) -> None:
        self._repository = repository
        self._snapshot = snapshot if snapshot is not None else Snapshot()
        self._default_image_url = default_image_url or settings.DEFAULT_IMAGE_URL
        self._write_lock = threading.Lock()

    @classmethod
    def open(cls, repository: SnapshotRepository, default_image_url: Optional[str] = None) -> "MatchingService":
        """
        Create a service from the repository's persisted snapshot.

        Falls back to the seed dataset when the snapshot is missing or corrupt.
        The seed is not written until the first mutation.

        Args:
            repository (SnapshotRepository): Where the snapshot lives.
            default_image_url (Optional[str]): Image reference for new profiles.

        Returns:
            MatchingService: Ready-to-use service.

        Raises:
            PersistenceError: If the snapshot exists but cannot be read.
        """
        try:
            snapshot = repository.load()
        except (NotFoundError, CorruptDataError) as e:
            logger.warning(
                "Failed to load snapshot, using seed data",
                path=str(repository.path),
                reason=e.message,
                error_type=e.__class__.__name__,
            )
            snapshot = seed_snapshot()
        return cls(repository, snapshot, default_image_url)

    @contextmanager
    def _transaction(self) -> Iterator[Snapshot]:
        """Yield a private working copy; save and publish it if the block succeeds."""
        with self._write_lock:
            working = self._snapshot.model_copy(deep=True)
            yield working
            try:
                self._repository.save(working)
            except PersistenceError as e:
                log_error(logger, e, "Failed to save snapshot, changes rolled back")
                raise
            self._snapshot = working

    # --- Mutations ---

    def swipe(self, actor_id: int, target_id: int, is_like: bool) -> SwipeResult:
        """
        Record a swipe and detect a resulting match.

        Args:
            actor_id (int): User making the decision.
            target_id (int): User being decided on.
            is_like (bool): True for a like, False for a pass.

        Returns:
            SwipeResult: `is_match` is True when both users currently like
            each other; `match` is the (new or existing) match record.

        Raises:
            ValidationError: For malformed identifiers or a self-swipe.
            NotFoundError: If either user does not exist.
            PersistenceError: If the snapshot could not be saved.
        """
        require_user_id(actor_id, "swiper_id")
        require_user_id(target_id, "target_id")
        if actor_id == target_id:
            raise ValidationError("Users cannot swipe on themselves", details={"user_id": actor_id})

        with sentry_sdk.start_span(op="match.swipe", name=f"{actor_id} -> {target_id}") as span:
            with self._transaction() as snapshot:
                profiles = ProfileStore(snapshot)
                for user_id in (actor_id, target_id):
                    if not profiles.exists(user_id):
                        raise NotFoundError(f"User not found: {user_id}", details={"user_id": user_id})

                ledger = SwipeLedger(snapshot)
                ledger.record_swipe(actor_id, target_id, is_like)

                is_new_match, match = False, None
                if is_like:
                    is_new_match, match = MatchDetector(snapshot, ledger).check_and_record_match(actor_id, target_id)

            span.set_data("is_match", match is not None)
            span.set_data("new_match", is_new_match)

        logger.info(
            "Swipe processed",
            actor=actor_id,
            target=target_id,
            is_like=is_like,
            is_match=match is not None,
            new_match=is_new_match,
        )
        return SwipeResult(success=True, is_match=match is not None, match=match)

    def upsert_profile(self, payload: ProfileUpsert) -> Profile:
        """
        Create or update a profile.

        New identifiers are assigned inside the writer lock.

        Raises:
            PersistenceError: If the snapshot could not be saved.
        """
        with sentry_sdk.start_span(op="profile.upsert", name=str(payload.id or "new")):
            with self._transaction() as snapshot:
                profile = ProfileStore(snapshot).upsert(payload, self._default_image_url)
        return profile.model_copy()

    # --- Reads ---

    def get_profile(self, user_id: int) -> Profile:
        """
        Get a profile by ID.

        Raises:
            ValidationError: If `user_id` is not a positive integer.
            NotFoundError: If the profile does not exist.
        """
        require_user_id(user_id)
        return ProfileStore(self._snapshot).get(user_id).model_copy()

    def list_profiles(self) -> List[Profile]:
        return [p.model_copy() for p in self._snapshot.profiles]

    def next_candidate(self, actor_id: int) -> Profile:
        """
        Get the next profile `actor_id` has not swiped on.

        Raises:
            ValidationError: If `actor_id` is malformed or unknown.
            NoCandidatesError: If there is nobody left to swipe on.
        """
        require_user_id(actor_id, "user_id")
        snapshot = self._snapshot
        with sentry_sdk.start_span(op="match.next_candidate", name=str(actor_id)):
            selector = CandidateSelector(ProfileStore(snapshot), SwipeLedger(snapshot))
            return selector.next_candidate(actor_id).model_copy()

    def get_matches(self, user_id: int) -> List[MatchRecord]:
        """
        Get all matches involving `user_id`.

        Returns an empty list for an unknown user.

        Raises:
            ValidationError: If `user_id` is malformed.
        """
        require_user_id(user_id, "user_id")
        snapshot = self._snapshot
        return MatchDetector(snapshot, SwipeLedger(snapshot)).matches_for(user_id)

    def snapshot(self) -> Snapshot:
        """Return a deep copy of the current published snapshot."""
        return self._snapshot.model_copy(deep=True)
