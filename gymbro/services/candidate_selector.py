"""Candidate selector: picks the next profile a user has not swiped on."""

from gymbro.models.profile import Profile
from gymbro.services.profile_store import ProfileStore
from gymbro.services.swipe_ledger import SwipeLedger
from gymbro.utils.errors import NoCandidatesError, ValidationError


class CandidateSelector:
    """
    Deterministic candidate selection.

    Profiles are scanned in snapshot insertion order. Distance, preferences
    and match status are not considered.
    """

    def __init__(self, profiles: ProfileStore, ledger: SwipeLedger) -> None:
        self._profiles = profiles
        self._ledger = ledger

    def next_candidate(self, actor_id: int) -> Profile:
        """
        Return the first profile that is not `actor_id` and has not been swiped on by them.

        Raises:
            ValidationError: If `actor_id` is not a known profile.
            NoCandidatesError: If every other profile has already been swiped on.
        """
        if not self._profiles.exists(actor_id):
            raise ValidationError(f"Unknown user: {actor_id}", details={"user_id": actor_id})

        for profile in self._profiles.all():
            if profile.id != actor_id and not self._ledger.has_swiped(actor_id, profile.id):
                return profile

        raise NoCandidatesError("No users available", details={"user_id": actor_id})
