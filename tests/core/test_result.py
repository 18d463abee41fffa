"""
Tests for the Result[P] envelope and the compute utilities.

Validates:
    - Generic payload and frozen immutability
    - Default warnings tuple and has_warning()
    - Timer sections and error paths
    - Tolerance tier lookup
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pywelch.core.compute import Timer, get_tolerance
from pywelch.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


# ═══════════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════════


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "test"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_welch",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "test"
        assert result.backend_name == "cpu_welch"

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()
        assert not result.has_warning("anything")

    def test_has_warning_substring(self):
        result = Result(
            params=FakeParams(1.0), info={}, timing=None, backend_name="cpu",
            warnings=("test may be underpowered (power 0.252 < 0.8)",),
        )
        assert result.has_warning("underpowered")
        assert not result.has_warning("zero")

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_recorded(self):
        timer = Timer()
        timer.start()
        with timer.section("welch_test"):
            pass
        with timer.section("welch_test"):
            pass
        with timer.section("intervals"):
            pass
        timer.stop()
        out = timer.result()
        assert set(out) == {"total_seconds", "welch_test", "intervals"}
        assert all(v >= 0.0 for v in out.values())

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


class TestTolerances:

    def test_lookup(self):
        tier = get_tolerance("normal_inverse")
        assert tier.rtol == 1.15e-9

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown tolerance tier"):
            get_tolerance("gpu_fp32")
