"""
Cryptogram Generators
=====================

Derangement generation and phrase substitution.
"""

from cryptogram.generators.derangement import (
    DerangementError,
    DerangementGenerator,
    RandomSource,
)
from cryptogram.generators.substitution import CryptogramBuilder

__all__ = [
    "CryptogramBuilder",
    "DerangementError",
    "DerangementGenerator",
    "RandomSource",
]
