"""Tests for the progress observers."""

import io
from types import SimpleNamespace

import pytest

from paramsweep.engine.permutator import ParameterPermutator
from paramsweep.reporting.progress import ProgressBar, StatusLine


class FakeClock:
    def __init__(self, t=0.0):
        self.t = t

    def __call__(self):
        return self.t


def _stub(i, total, best=1.0):
    return SimpleNamespace(
        current_iteration=i,
        total_permutations=lambda: total,
        best_score=best,
    )


class TestProgressBar:
    def test_render_fills_width(self):
        clock = FakeClock()
        bar = ProgressBar(width=80, clock=clock)
        clock.t = 120.0
        line = bar.render(_stub(2, 4, best=3.0))
        assert line.startswith("\r[2/4] [0.0it/s 2.0>2.0 min] [best=3.0] [")
        assert line.endswith("] ")
        assert len(line) == 81

    def test_render_position_marker(self):
        bar = ProgressBar(width=80, clock=FakeClock())
        line = bar.render(_stub(2, 4))
        inner = line[line.rindex("[") + 1:line.rindex("]")]
        pos = len(inner) * 2 // 4
        assert inner[:pos] == "=" * pos
        assert inner[pos] == ">"
        assert inner[pos + 1:].strip() == ""

    def test_first_call_has_no_elapsed_time(self):
        bar = ProgressBar(width=80, clock=FakeClock())
        line = bar.render(_stub(1, 10))
        assert "[0.0it/s 0.0>0.0 min]" in line

    def test_as_callback(self):
        stream = io.StringIO()
        chained = []
        bar = ProgressBar(
            stream=stream, width=60, clock=FakeClock(),
            additional_callback=chained.append,
        )
        pp = ParameterPermutator(lambda a, b: a + b, [[1, 2], [3, 4]])
        pp.set_progress_callback(bar)
        pp.run()

        out = stream.getvalue()
        assert out.count("\r") == 4
        assert "[4/4]" in out
        assert "[best=6.0]" in out
        assert out.endswith("\n")
        assert chained == [pp] * 4

    def test_narrow_terminal(self):
        bar = ProgressBar(width=10, clock=FakeClock())
        line = bar.render(_stub(1, 2))
        assert line.endswith("[] ")


class TestStatusLine:
    def test_every(self):
        stream = io.StringIO()
        pp = ParameterPermutator(lambda a: float(a), [[1, 5, 2, 4, 3]])
        pp.set_progress_callback(StatusLine(stream=stream, every=2))
        pp.run()
        assert stream.getvalue().splitlines() == [
            "iteration=2 total=5 best=5.0",
            "iteration=4 total=5 best=5.0",
            "iteration=5 total=5 best=5.0",
        ]

    def test_invalid_every(self):
        with pytest.raises(ValueError):
            StatusLine(every=0)
