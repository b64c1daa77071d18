"""
Exceptions
==========

Error conditions raised at the boundaries of the planner.
An unreachable goal is not an error: searches return an empty path.
"""

from typing import Tuple


class InvalidEndpoint(ValueError):
    """Start or goal lies outside the grid or on an obstacle"""

    def __init__(self, cell: Tuple[int, int], role: str = 'endpoint', reason: str = 'invalid'):
        self.cell = tuple(cell)
        self.role = role
        self.reason = reason
        super().__init__(f"{role} {self.cell} is {reason}")


class MapFormatError(ValueError):
    """Map text is empty or its rows have unequal lengths"""
