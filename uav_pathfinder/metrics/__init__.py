"""
Metrics Module
==============

Path statistics and run outcome records.
"""

from .path_metrics import (
    PathStep,
    PathStatistics,
    RunStatus,
    RunResult,
)

__all__ = [
    'PathStep',
    'PathStatistics',
    'RunStatus',
    'RunResult',
]
