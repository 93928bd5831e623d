"""
Cryptogram Collectors
=====================

Input sources that supply the phrase to encode.
"""

from cryptogram.collectors.phrase import ArgumentSource, InputSource, PromptSource

__all__ = [
    "ArgumentSource",
    "InputSource",
    "PromptSource",
]
