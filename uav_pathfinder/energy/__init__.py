"""
Energy Module
=============

Energy accounting and vehicle state.
"""

from .model import EnergyModel, EnergyBreakdown
from .drone import Drone

__all__ = [
    'EnergyModel',
    'EnergyBreakdown',
    'Drone',
]
