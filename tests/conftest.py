"""pytest configuration and fixtures."""

import pytest

from gymbro.models.profile import Profile
from gymbro.models.snapshot import Snapshot
from gymbro.services.matching_service import MatchingService
from gymbro.services.repository import SnapshotRepository, seed_snapshot

DEFAULT_IMAGE = "/images/default.jpg"


def make_snapshot(*user_ids: int) -> Snapshot:
    """Snapshot holding bare profiles with the given ids, in order."""
    return Snapshot(profiles=[Profile(id=user_id, train_type="Strength") for user_id in user_ids])


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "storage.json"


@pytest.fixture
def repository(data_file):
    return SnapshotRepository(data_file)


@pytest.fixture
def service(repository):
    """Service over the three-profile seed dataset."""
    return MatchingService(repository, seed_snapshot(), default_image_url=DEFAULT_IMAGE)


@pytest.fixture
def pair_service(repository):
    """Service with only profiles 1 and 2."""
    return MatchingService(repository, make_snapshot(1, 2), default_image_url=DEFAULT_IMAGE)
