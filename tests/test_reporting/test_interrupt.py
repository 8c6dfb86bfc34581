"""Tests for interrupt reporting."""

import io
import signal

import pytest

from paramsweep.engine.permutator import ParameterPermutator
from paramsweep.reporting.interrupt import format_best_so_far, install_interrupt_handler


class TestFormatBestSoFar:
    def test_no_sweep(self):
        assert format_best_so_far(None) == "[No sweep running]"

    def test_with_permutator(self):
        pp = ParameterPermutator.from_named(lambda a: float(a), [("a", [1, 3, 2])])
        pp.run()
        text = format_best_so_far(pp)
        assert "iteration: 3/3" in text
        assert "best score: 3.0" in text
        assert "best parameters: {a=3, }" in text


class TestInterruptHandler:
    def test_handler_reports_best_so_far_and_exits(self):
        stream = io.StringIO()
        previous = install_interrupt_handler(stream=stream)
        try:
            handler = signal.getsignal(signal.SIGINT)

            def on_progress(pp):
                if pp.current_iteration == 2:
                    handler(signal.SIGINT, None)

            pp = ParameterPermutator.from_named(
                lambda a: float(a), [("a", [4, 7, 1, 9])],
            )
            pp.set_progress_callback(on_progress)
            with pytest.raises(SystemExit) as exc_info:
                pp.run()
        finally:
            signal.signal(signal.SIGINT, previous)

        assert exc_info.value.code == signal.SIGINT
        out = stream.getvalue()
        assert "iteration: 2/4" in out
        assert "best parameters: {a=7, }" in out
        assert pp.current_iteration == 2

    def test_custom_exit_code(self):
        previous = install_interrupt_handler(stream=io.StringIO(), exit_code=0)
        try:
            handler = signal.getsignal(signal.SIGINT)
            with pytest.raises(SystemExit) as exc_info:
                handler(signal.SIGINT, None)
        finally:
            signal.signal(signal.SIGINT, previous)
        assert exc_info.value.code == 0
