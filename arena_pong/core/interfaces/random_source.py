"""
Random source protocol - lets tests substitute a deterministic generator
"""

from typing import Protocol


class RandomSource(Protocol):
    """
    Source of uniformly distributed floats.

    ``random.Random`` already satisfies this protocol, so a seeded instance
    can be passed wherever a RandomSource is expected.
    """

    def uniform(self, a: float, b: float) -> float:
        """
        Return a float drawn uniformly from the closed range [a, b].

        Args:
            a: Lower bound
            b: Upper bound
        """
        ...
