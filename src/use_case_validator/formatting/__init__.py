"""
Review Formatter

This module provides formatting for the validator's summary review.
"""

from .summary import SummaryFormatter, SUMMARY_HEADER, SUMMARY_TITLE

__all__ = ['SummaryFormatter', 'SUMMARY_HEADER', 'SUMMARY_TITLE']
