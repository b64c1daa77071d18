"""
Planning Module
===============

Search strategies and path post-processing.
"""

from .search import PathOptimizer, PlannerStats, SearchStrategy
from .postprocess import PathPostProcessor, interpolate_line

__all__ = [
    'PathOptimizer',
    'PlannerStats',
    'SearchStrategy',
    'PathPostProcessor',
    'interpolate_line',
]
