"""
Cryptogram Core Module
======================

Data models for the cryptogram generator. The engine lives in
:mod:`cryptogram.core.engine`.
"""

from cryptogram.core.models import (
    ALPHABET,
    Cryptogram,
    Derangement,
    RoundStatisticsResult,
)

__all__ = [
    "ALPHABET",
    "Cryptogram",
    "Derangement",
    "RoundStatisticsResult",
]
