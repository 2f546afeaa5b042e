"""Snapshot persistence for the GymBro matching service.

The whole state is stored as one indented JSON document with three arrays
(`profiles`, `swipes`, `matches`) and rewritten wholesale on every mutation.
Writes go to a temporary file in the same directory which is then renamed over
the target, so a crash mid-write never leaves a truncated snapshot behind.
"""

import contextlib
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Tuple, Union

import pydantic
import sentry_sdk

from gymbro.models.match import MatchKey, MatchRecord
from gymbro.models.profile import Profile
from gymbro.models.snapshot import Snapshot
from gymbro.models.swipe import SwipeRecord
from gymbro.utils.errors import ConfigurationError, CorruptDataError, NotFoundError, PersistenceError
from gymbro.utils.logging import get_logger

logger = get_logger(__name__)


def seed_snapshot() -> Snapshot:
    """
    Build the fixed seed dataset used when no usable snapshot exists.

    Returns:
        Snapshot: Three profiles (ids 1, 2, 3) and no swipes or matches.
    """
    return Snapshot(
        profiles=[
            Profile(
                id=1,
                image_url="/images/cat.jpeg",
                time="10:00",
                day="Mon",
                text_info="Strength training",
                train_type="Strength",
            ),
            Profile(
                id=2,
                image_url="/images/dog.jpeg",
                time="12:00",
                day="Tue",
                text_info="Cardio session",
                train_type="Cardio",
            ),
            Profile(
                id=3,
                image_url="/images/myles.jpeg",
                time="15:00",
                day="Wed",
                text_info="Yoga for beginners",
                train_type="Yoga",
            ),
        ]
    )


class SnapshotRepository:
    """Loads and saves whole snapshots to a single JSON file."""

    def __init__(self, path: Union[str, Path]) -> None:
        if not str(path).strip():
            raise ConfigurationError("Snapshot path is empty")
        self.path = Path(path)
        if self.path.is_dir():
            raise ConfigurationError("Snapshot path is a directory", details={"path": str(self.path)})

    def load(self) -> Snapshot:
        """
        Read and validate the snapshot file.

        Duplicate swipes for the same ordered pair are collapsed (the last one
        wins) and matches are canonicalised and deduplicated (the first one wins).

        Returns:
            Snapshot: The persisted state.

        Raises:
            NotFoundError: If the file does not exist.
            CorruptDataError: If the file cannot be parsed or has duplicate profile ids.
            PersistenceError: If the file cannot be read.
        """
        with sentry_sdk.start_span(op="snapshot.load", name=str(self.path)):
            try:
                raw = self.path.read_text(encoding="utf-8")
            except FileNotFoundError as e:
                raise NotFoundError(f"Snapshot file not found: {self.path}", details={"path": str(self.path)}) from e
            except OSError as e:
                raise PersistenceError("Failed to read snapshot", str(self.path), {"error": str(e)}) from e

            try:
                snapshot = Snapshot.model_validate_json(raw)
            except pydantic.ValidationError as e:
                raise CorruptDataError(
                    "Snapshot file is malformed", str(self.path), {"errors": e.error_count(), "error": str(e)}
                ) from e

            self._check_profiles(snapshot.profiles)
            snapshot.swipes = self._dedupe_swipes(snapshot.swipes)
            snapshot.matches = self._dedupe_matches(snapshot.matches)

            logger.info(
                "Snapshot loaded",
                path=str(self.path),
                profiles=len(snapshot.profiles),
                swipes=len(snapshot.swipes),
                matches=len(snapshot.matches),
            )
            return snapshot

    def save(self, snapshot: Snapshot) -> None:
        """
        Atomically replace the snapshot file.

        Args:
            snapshot (Snapshot): State to persist.

        Raises:
            PersistenceError: If the file cannot be written. The previous file is left intact.
        """
        with sentry_sdk.start_span(op="snapshot.save", name=str(self.path)):
            payload = snapshot.to_json()
            tmp_path = None
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                    fh.flush()
                    os.fsync(fh.fileno())
                os.replace(tmp_path, self.path)
            except OSError as e:
                if tmp_path is not None:
                    with contextlib.suppress(OSError):
                        os.unlink(tmp_path)
                raise PersistenceError("Failed to write snapshot", str(self.path), {"error": str(e)}) from e

            logger.debug("Snapshot saved", path=str(self.path), size=len(payload))

    def _check_profiles(self, profiles: List[Profile]) -> None:
        seen = set()
        for profile in profiles:
            if profile.id in seen:
                raise CorruptDataError(
                    f"Duplicate profile id in snapshot: {profile.id}", str(self.path), {"profile_id": profile.id}
                )
            seen.add(profile.id)

    def _dedupe_swipes(self, swipes: List[SwipeRecord]) -> List[SwipeRecord]:
        # first position of a pair is kept, its value comes from the last entry
        by_key: Dict[Tuple[int, int], SwipeRecord] = {}
        for swipe in swipes:
            by_key[swipe.key] = swipe
        if len(by_key) != len(swipes):
            logger.warning(
                "Collapsed duplicate swipes in snapshot",
                path=str(self.path),
                before=len(swipes),
                after=len(by_key),
            )
        return list(by_key.values())

    def _dedupe_matches(self, matches: List[MatchRecord]) -> List[MatchRecord]:
        by_key: Dict[MatchKey, MatchRecord] = {}
        for match in matches:
            by_key.setdefault(match.key, match)
        if len(by_key) != len(matches):
            logger.warning(
                "Collapsed duplicate matches in snapshot",
                path=str(self.path),
                before=len(matches),
                after=len(by_key),
            )
        return list(by_key.values())
