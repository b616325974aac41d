"""Reporting helpers for finished calculations."""

from simpsonrule.analysis.plot import plot_calculation
from simpsonrule.analysis.report import format_report, steps_to_dataframe

__all__ = [
    "format_report",
    "plot_calculation",
    "steps_to_dataframe",
]
