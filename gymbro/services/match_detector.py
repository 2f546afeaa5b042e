"""Match detector: turns reciprocal likes into match records."""

from typing import Dict, List, Optional, Tuple

from gymbro.models.match import MatchKey, MatchRecord
from gymbro.models.snapshot import Snapshot
from gymbro.services.swipe_ledger import SwipeLedger
from gymbro.utils.helpers import now_ms
from gymbro.utils.logging import get_logger

logger = get_logger(__name__)


class MatchDetector:
    """
    Derives confirmed matches from a swipe ledger.

    Pure decision logic over the in-memory snapshot. Matches are keyed by
    their canonical pair, so each unordered pair has at most one record, and
    records are never removed once created.
    """

    def __init__(self, snapshot: Snapshot, ledger: SwipeLedger) -> None:
        self._snapshot = snapshot
        self._ledger = ledger
        self._index: Dict[MatchKey, int] = {m.key: i for i, m in enumerate(snapshot.matches)}

    def __len__(self) -> int:
        return len(self._snapshot.matches)

    def check_and_record_match(
        self, actor_id: int, target_id: int, timestamp: Optional[int] = None
    ) -> Tuple[bool, Optional[MatchRecord]]:
        """
        Check reciprocity after `actor_id` liked `target_id`.

        Args:
            actor_id (int): User who just liked.
            target_id (int): User who was liked.
            timestamp (Optional[int]): Epoch milliseconds for a new match; defaults to now.

        Returns:
            Tuple[bool, Optional[MatchRecord]]: `(True, match)` when a match was
            just created, `(False, match)` when the pair was already matched and
            `(False, None)` when the like is not (yet) mutual.
        """
        if not self._ledger.is_liked(actor_id, target_id) or not self._ledger.is_liked(target_id, actor_id):
            return False, None

        key = MatchKey.of(actor_id, target_id)
        existing = self.get(key)
        if existing is not None:
            return False, existing

        match = MatchRecord.for_key(key, now_ms() if timestamp is None else timestamp)
        self._index[key] = len(self._snapshot.matches)
        self._snapshot.matches.append(match)
        logger.info("Match created", user1_id=match.user1_id, user2_id=match.user2_id)
        return True, match

    def get(self, key: MatchKey) -> Optional[MatchRecord]:
        position = self._index.get(key)
        return None if position is None else self._snapshot.matches[position]

    def matches_for(self, user_id: int) -> List[MatchRecord]:
        """All matches involving `user_id`, in creation order."""
        return [m for m in self._snapshot.matches if m.involves(user_id)]
