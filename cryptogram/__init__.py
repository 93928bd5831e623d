"""
Cryptogram -- Substitution Puzzle Generator
===========================================

Builds cryptograms: the letters of a phrase are replaced through a
random derangement of the alphabet, so no letter stands for itself.

Modules:
    - cryptogram.core.engine: Central orchestrator
    - cryptogram.core.models: Pydantic data models
    - cryptogram.generators: Derangement generation and substitution
    - cryptogram.analyzers: Attempt-count statistics
    - cryptogram.collectors: Phrase input sources
    - cryptogram.output: Console and report output
    - cryptogram.cli: Click-based command-line interface
"""

__version__ = "1.0.0"
__tool_name__ = "cryptogram"
