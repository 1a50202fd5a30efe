"""Tests for the caller-owned candidate pool cache."""

from helper_match.application.candidate_pool import CandidatePoolCache, load_candidates
from tests.fakes import FakeCandidateSource, FakeClock
from tests.support.rows import candidate_row


def _source() -> FakeCandidateSource:
    return FakeCandidateSource(rows=[candidate_row(), candidate_row(Code="H002", Name="Mya")])


def test_load_candidates_adapts_every_row() -> None:
    candidates = load_candidates(_source())

    assert [c.code for c in candidates] == ["H001", "H002"]


class TestCandidatePoolCache:
    def test_reuses_the_pool_within_the_ttl(self) -> None:
        source = _source()
        clock = FakeClock()
        cache = CandidatePoolCache(source, ttl_seconds=300, clock=clock)

        first = cache.get()
        clock.advance(299)
        second = cache.get()

        assert source.loads == 1
        assert first == second

    def test_reloads_after_the_ttl(self) -> None:
        source = _source()
        clock = FakeClock()
        cache = CandidatePoolCache(source, ttl_seconds=300, clock=clock)

        cache.get()
        clock.advance(300)
        cache.get()

        assert source.loads == 2

    def test_invalidate_forces_a_reload(self) -> None:
        source = _source()
        cache = CandidatePoolCache(source, clock=FakeClock())

        cache.get()
        cache.invalidate()
        cache.get()

        assert source.loads == 2

    def test_callers_cannot_mutate_the_cached_pool(self) -> None:
        cache = CandidatePoolCache(_source(), clock=FakeClock())

        cache.get().clear()

        assert len(cache.get()) == 2
