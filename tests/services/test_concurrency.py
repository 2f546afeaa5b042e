"""Concurrency tests: one writer at a time across the whole snapshot."""

import threading
from concurrent.futures import ThreadPoolExecutor

from gymbro.models.profile import ProfileUpsert
from gymbro.services.matching_service import MatchingService
from tests.conftest import make_snapshot


def _run_together(*calls):
    barrier = threading.Barrier(len(calls))

    def run(call):
        barrier.wait()
        return call()

    with ThreadPoolExecutor(max_workers=len(calls)) as pool:
        return list(pool.map(run, calls))


def test_simultaneous_reciprocal_likes_create_one_match(repository):
    for _ in range(20):
        service = MatchingService(repository, make_snapshot(1, 2))

        results = _run_together(lambda: service.swipe(1, 2, True), lambda: service.swipe(2, 1, True))

        snapshot = service.snapshot()
        assert len(snapshot.matches) == 1
        assert len(snapshot.swipes) == 2
        # exactly the later of the two swipes observes the reciprocal like
        assert sorted(r.is_match for r in results) == [False, True]


def test_concurrent_swipes_lose_no_writes(repository):
    user_ids = list(range(1, 11))
    service = MatchingService(repository, make_snapshot(*user_ids))

    calls = [
        (lambda a=actor, t=target: service.swipe(a, t, True))
        for actor in user_ids
        for target in user_ids
        if actor != target
    ]
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda call: call(), calls))

    snapshot = service.snapshot()
    assert len(snapshot.swipes) == 90
    assert len(snapshot.matches) == 45
    assert len({m.key for m in snapshot.matches}) == 45
    assert repository.load() == snapshot


def test_concurrent_creates_get_distinct_ids(repository):
    service = MatchingService(repository, make_snapshot(1))

    calls = [lambda: service.upsert_profile(ProfileUpsert(train_type="Run")) for _ in range(16)]
    created = _run_together(*calls)

    assert sorted(p.id for p in created) == list(range(2, 18))
    assert len(service.list_profiles()) == 17


def test_readers_see_committed_state_during_writes(repository):
    service = MatchingService(repository, make_snapshot(1, 2, 3))
    stop = threading.Event()
    errors = []

    def reader():
        while not stop.is_set():
            snapshot = service.snapshot()
            keys = [s.key for s in snapshot.swipes]
            if len(keys) != len(set(keys)):
                errors.append(keys)

    thread = threading.Thread(target=reader)
    thread.start()
    try:
        for _ in range(30):
            service.swipe(1, 2, True)
            service.swipe(1, 2, False)
            service.swipe(3, 1, True)
    finally:
        stop.set()
        thread.join()

    assert errors == []
    assert len(service.snapshot().swipes) == 2
