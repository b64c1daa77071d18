"""
Pipeline Module
===============

Timed planning requests and strategy comparison.
"""

from .runner import MissionRunner

__all__ = [
    'MissionRunner',
]
