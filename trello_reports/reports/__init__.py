"""Markdown report renderers."""

from .base import ReportData
from .full import render_full_report
from .summary import build_recommendations, render_summary_report
from .work_summary import completed_cards_by_label, generate_work_summary

__all__ = [
    "ReportData",
    "build_recommendations",
    "completed_cards_by_label",
    "generate_work_summary",
    "render_full_report",
    "render_summary_report",
]
