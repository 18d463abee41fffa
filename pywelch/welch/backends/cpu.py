"""
CPU reference backend for the Welch test.

Runs the engine, the p-value and the interval builder in sequence and
wraps the outcome in a Result envelope with timing and warnings.
"""

from __future__ import annotations

import math

from pywelch.core.compute.timing import Timer
from pywelch.core.result import Result
from pywelch.welch._common import ADEQUATE_POWER, WelchParams
from pywelch.welch._effect_size import pooled_standard_deviation
from pywelch.welch._engine import run_welch_test, two_sided_p_value
from pywelch.welch._intervals import build_intervals
from pywelch.welch.design import WelchDesign


METHOD_NAME = "Welch Two Sample t-test"


class CPUWelchBackend:
    """CPU reference backend for the Welch test."""

    @property
    def name(self) -> str:
        return 'cpu_welch'

    def solve(self, design: WelchDesign) -> Result[WelchParams]:
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section('welch_test'):
            result = run_welch_test(
                design.group1, design.group2, design.hypothesis,
                conf_level=design.conf_level,
            )
            p_value = two_sided_p_value(
                result.t_statistic,
                result.degrees_of_freedom,
                method=design.p_value_method,
            )

        with timer.section('intervals'):
            intervals = build_intervals(
                design.group1, design.group2, result, design.levels,
            )

        pooled_sd = pooled_standard_deviation(design.group1, design.group2)
        if pooled_sd == 0.0:
            warnings_list.append(
                "pooled standard deviation is zero; Cohen's d is not finite"
            )
        if not math.isnan(result.power) and result.power < ADEQUATE_POWER:
            warnings_list.append(
                f"test may be underpowered (power {result.power:.3f} < {ADEQUATE_POWER})"
            )

        timer.stop()

        params = WelchParams(
            group1=design.group1,
            group2=design.group2,
            hypothesis=design.hypothesis,
            result=result,
            p_value=p_value,
            p_value_method=design.p_value_method,
            conf_level=design.conf_level,
            intervals=intervals,
            extras={'pooled_sd': pooled_sd, 'alpha': design.alpha},
        )

        return Result(
            params=params,
            info={
                'method': METHOD_NAME,
                'p_value_method': design.p_value_method,
                'levels': design.levels,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
