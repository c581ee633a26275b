"""Strict majority algorithms for equality-only element types.

Implements the Boyer-Moore majority vote and the Fischer-Salzberg (MJRTY)
run-collapsing algorithm, with stream generators and a simulation harness
for comparing them.
"""

from .algorithms import (
    IMPLEMENTED_METHODS,
    METHODS,
    MajorityResult,
    Method,
    boyer_moore,
    boyer_moore_index,
    find_majority,
    fischer_salzberg,
    fischer_salzberg_index,
    matula_tournament,
    matula_tournament_index,
)

__version__ = "0.1.0"
