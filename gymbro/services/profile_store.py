"""Profile store: upsert and lookup of profiles within a snapshot."""

from typing import Dict, List

from gymbro.models.profile import Profile, ProfileUpsert
from gymbro.models.snapshot import Snapshot
from gymbro.utils.errors import NotFoundError
from gymbro.utils.logging import get_logger

logger = get_logger(__name__)

_UPDATABLE_FIELDS = ("image_url", "time", "day", "text_info", "train_type")


class ProfileStore:
    """
    View over the profiles of one snapshot.

    Profiles keep their insertion order; the index only maps ids to positions.
    """

    def __init__(self, snapshot: Snapshot) -> None:
        self._snapshot = snapshot
        self._index: Dict[int, int] = {p.id: i for i, p in enumerate(snapshot.profiles)}

    def __len__(self) -> int:
        return len(self._snapshot.profiles)

    def exists(self, user_id: int) -> bool:
        return user_id in self._index

    def get(self, user_id: int) -> Profile:
        """
        Get a profile by ID.

        Raises:
            NotFoundError: If no profile has this identifier.
        """
        position = self._index.get(user_id)
        if position is None:
            raise NotFoundError(f"User not found: {user_id}", details={"user_id": user_id})
        return self._snapshot.profiles[position]

    def all(self) -> List[Profile]:
        return list(self._snapshot.profiles)

    def next_id(self) -> int:
        return max(self._index, default=0) + 1

    def upsert(self, payload: ProfileUpsert, default_image_url: str) -> Profile:
        """
        Create or update a profile.

        A payload without an id creates a profile with the next sequential id.
        A payload whose id is unknown creates a profile with exactly that id.
        Otherwise the supplied (non-None) fields overwrite the stored ones.

        Args:
            payload (ProfileUpsert): Fields to apply.
            default_image_url (str): Image reference for new profiles without one.

        Returns:
            Profile: The stored profile after the upsert.
        """
        changes = {field: getattr(payload, field) for field in _UPDATABLE_FIELDS if getattr(payload, field) is not None}

        if not payload.is_create and self.exists(payload.id):
            position = self._index[payload.id]
            updated = self._snapshot.profiles[position].model_copy(update=changes)
            self._snapshot.profiles[position] = updated
            logger.info("Profile updated", user_id=updated.id, fields=sorted(changes))
            return updated

        user_id = self.next_id() if payload.is_create else payload.id
        changes.setdefault("image_url", default_image_url)
        profile = Profile(id=user_id, **changes)
        self._index[profile.id] = len(self._snapshot.profiles)
        self._snapshot.profiles.append(profile)
        logger.info("Profile created", user_id=profile.id)
        return profile
