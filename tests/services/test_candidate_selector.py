"""Tests for the candidate selector."""

import pytest

from gymbro.services.candidate_selector import CandidateSelector
from gymbro.services.profile_store import ProfileStore
from gymbro.services.swipe_ledger import SwipeLedger
from gymbro.utils.errors import NoCandidatesError, NotFoundError, ValidationError
from tests.conftest import make_snapshot


class TestCandidateSelector:
    @pytest.fixture
    def snapshot(self):
        return make_snapshot(1, 2, 3)

    @pytest.fixture
    def ledger(self, snapshot):
        return SwipeLedger(snapshot)

    @pytest.fixture
    def selector(self, snapshot, ledger):
        return CandidateSelector(ProfileStore(snapshot), ledger)

    def test_first_unswiped_non_self_profile(self, selector):
        assert selector.next_candidate(1).id == 2

    def test_never_returns_self(self, selector):
        assert selector.next_candidate(2).id == 1

    def test_skips_passed_and_liked_profiles(self, selector, ledger):
        ledger.record_swipe(1, 2, False)
        assert selector.next_candidate(1).id == 3

        ledger.record_swipe(1, 3, True)
        with pytest.raises(NoCandidatesError):
            selector.next_candidate(1)

    def test_no_candidates_is_a_not_found(self, selector, ledger):
        ledger.record_swipe(1, 2, True)
        ledger.record_swipe(1, 3, True)
        with pytest.raises(NotFoundError) as exc_info:
            selector.next_candidate(1)
        assert exc_info.value.status_code == 404

    def test_swipes_by_others_do_not_matter(self, selector, ledger):
        ledger.record_swipe(2, 3, True)
        ledger.record_swipe(3, 2, True)
        assert selector.next_candidate(1).id == 2

    def test_unknown_actor_is_invalid(self, selector):
        with pytest.raises(ValidationError):
            selector.next_candidate(42)

    def test_follows_insertion_order_not_id_order(self):
        snapshot = make_snapshot(5, 9, 2)
        selector = CandidateSelector(ProfileStore(snapshot), SwipeLedger(snapshot))
        assert selector.next_candidate(2).id == 5
        assert selector.next_candidate(5).id == 9

    def test_single_profile_has_no_candidates(self):
        snapshot = make_snapshot(1)
        selector = CandidateSelector(ProfileStore(snapshot), SwipeLedger(snapshot))
        with pytest.raises(NoCandidatesError):
            selector.next_candidate(1)
