"""Tests for the process-wide active permutator handle."""

from paramsweep.engine.active import activate, active_permutator
from paramsweep.engine.permutator import ParameterPermutator


def _make(n=2):
    return ParameterPermutator(lambda a: float(a), [list(range(n))])


class TestActivate:
    def test_none_by_default(self):
        assert active_permutator() is None

    def test_nested_restores_previous(self):
        outer, inner = _make(), _make()
        with activate(outer):
            assert active_permutator() is outer
            with activate(inner):
                assert active_permutator() is inner
            assert active_permutator() is outer
        assert active_permutator() is None

    def test_nested_run_from_callback(self):
        inner = _make(3)
        outer = _make(2)
        seen = []

        def on_progress(pp):
            inner.run()
            seen.append(active_permutator())

        outer.set_progress_callback(on_progress)
        outer.run()
        assert seen == [outer, outer]
        assert inner.current_iteration == 3
