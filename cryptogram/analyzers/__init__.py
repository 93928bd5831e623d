"""
Cryptogram Analyzers
====================

Empirical checks on the derangement generator.
"""

from cryptogram.analyzers.rounds import InvalidArgument, RoundStatistics

__all__ = [
    "InvalidArgument",
    "RoundStatistics",
]
