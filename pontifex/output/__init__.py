"""
Pontifex Output Module
=======================

Console and JSON report output.
"""

from pontifex.output.console import PontifexConsoleOutput
from pontifex.output.report import PontifexReportGenerator

__all__ = ["PontifexConsoleOutput", "PontifexReportGenerator"]
