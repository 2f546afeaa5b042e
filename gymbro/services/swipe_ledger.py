"""Swipe ledger: the deduplicated record of every like/pass decision."""

from typing import Dict, Optional, Tuple

from gymbro.models.snapshot import Snapshot
from gymbro.models.swipe import SwipeRecord
from gymbro.utils.errors import ValidationError
from gymbro.utils.helpers import now_ms
from gymbro.utils.logging import get_logger

logger = get_logger(__name__)


class SwipeLedger:
    """
    View over the swipes of one snapshot.

    Holds at most one record per ordered `(actor_id, target_id)` pair. A
    repeated decision follows last-write-wins: the same decision again is a
    no-op, a different one replaces the stored record in place.
    """

    def __init__(self, snapshot: Snapshot) -> None:
        self._snapshot = snapshot
        self._index: Dict[Tuple[int, int], int] = {s.key: i for i, s in enumerate(snapshot.swipes)}

    def __len__(self) -> int:
        return len(self._snapshot.swipes)

    def record_swipe(
        self, actor_id: int, target_id: int, is_like: bool, timestamp: Optional[int] = None
    ) -> SwipeRecord:
        """
        Record a decision by `actor_id` about `target_id`.

        Existence of both users is checked by the caller.

        Args:
            actor_id (int): User making the decision.
            target_id (int): User being decided on.
            is_like (bool): True for a like, False for a pass.
            timestamp (Optional[int]): Epoch milliseconds; defaults to now.

        Returns:
            SwipeRecord: The record now stored for the pair.

        Raises:
            ValidationError: If a user swipes on themselves.
        """
        if actor_id == target_id:
            raise ValidationError("Users cannot swipe on themselves", details={"user_id": actor_id})

        key = (actor_id, target_id)
        position = self._index.get(key)

        if position is not None:
            existing = self._snapshot.swipes[position]
            if existing.is_like == is_like:
                logger.debug("Repeated swipe ignored", actor=actor_id, target=target_id, is_like=is_like)
                return existing

            record = self._build(actor_id, target_id, is_like, timestamp)
            self._snapshot.swipes[position] = record
            logger.info("Swipe decision changed", actor=actor_id, target=target_id, is_like=is_like)
            return record

        record = self._build(actor_id, target_id, is_like, timestamp)
        self._index[key] = len(self._snapshot.swipes)
        self._snapshot.swipes.append(record)
        logger.info("Swipe recorded", actor=actor_id, target=target_id, is_like=is_like)
        return record

    def get(self, actor_id: int, target_id: int) -> Optional[SwipeRecord]:
        position = self._index.get((actor_id, target_id))
        return None if position is None else self._snapshot.swipes[position]

    def has_swiped(self, actor_id: int, target_id: int) -> bool:
        return (actor_id, target_id) in self._index

    def is_liked(self, actor_id: int, target_id: int) -> bool:
        """Check whether `actor_id` currently likes `target_id`."""
        record = self.get(actor_id, target_id)
        return record is not None and record.is_like

    @staticmethod
    def _build(actor_id: int, target_id: int, is_like: bool, timestamp: Optional[int]) -> SwipeRecord:
        return SwipeRecord(
            actor_id=actor_id,
            target_id=target_id,
            is_like=is_like,
            timestamp=now_ms() if timestamp is None else timestamp,
        )
