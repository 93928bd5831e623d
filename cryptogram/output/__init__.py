"""
Cryptogram Output Module
========================

Console display and report generation for cryptograms.
"""

from cryptogram.output.console import CryptogramConsoleOutput
from cryptogram.output.report import CryptogramReportGenerator

__all__ = [
    "CryptogramConsoleOutput",
    "CryptogramReportGenerator",
]
