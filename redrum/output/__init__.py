"""
Redrum Output Module
=====================

Console display and report generation for analysis results.
"""

from redrum.output.console import RedrumConsoleOutput
from redrum.output.report import RedrumReportGenerator

__all__ = [
    "RedrumConsoleOutput",
    "RedrumReportGenerator",
]
