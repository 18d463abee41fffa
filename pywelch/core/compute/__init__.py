"""
Compute utilities: timing and approximation tolerance tiers.
"""

from pywelch.core.compute.timing import Timer
from pywelch.core.compute.tolerances import ToleranceTier, get_tolerance

__all__ = [
    "Timer",
    "ToleranceTier",
    "get_tolerance",
]
