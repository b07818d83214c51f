"""
Summary Formatter

Renders the per-file validation results as the markdown table kept in
the validator's summary review on the pull request.
"""

import logging
from typing import List

from ..models.review import FileValidationResult, ValidationReport


logger = logging.getLogger(__name__)

SUMMARY_TITLE = "🔎 Use Case Validator"
SUMMARY_HEADER = f"{SUMMARY_TITLE}\n_Validating ..._"

SUCCESSFUL_OUTPUT = "✅"
UNSUCCESSFUL_OUTPUT = "❌"
DETAILS_ALL_VALID = "All valid!"


class SummaryFormatter:
    """
    Formats validation reports for the summary review.

    One table row per validated use case file, in processing order.
    """

    def __init__(self, detail_separator: str = "<br/>"):
        self.detail_separator = detail_separator

    def format_summary(self, report: ValidationReport) -> str:
        """
        Format the full summary review body.

        Args:
            report: ValidationReport of the run

        Returns:
            Review body; only the header when no use case file was validated
        """
        if not report.results:
            return SUMMARY_HEADER

        table = self.format_table(report.results)
        logger.debug(f"Summary table with {len(report.results)} rows")
        return f"{SUMMARY_HEADER}\n\n{table}"

    def format_table(self, results: List[FileValidationResult]) -> str:
        lines = [
            "| File | Status | Details |",
            "| :--- | :----: | :------ |",
        ]
        lines.extend(self.format_row(result) for result in results)
        return "\n".join(lines) + "\n"

    def format_row(self, result: FileValidationResult) -> str:
        """Format a single table row."""
        file_cell = f"`{result.file_name}`"
        if result.changed_file.contents_url:
            file_cell = f"[{file_cell}]({result.changed_file.contents_url})"

        if result.is_valid:
            status = SUCCESSFUL_OUTPUT
            details = DETAILS_ALL_VALID
        else:
            status = UNSUCCESSFUL_OUTPUT
            details = self.detail_separator.join(f"— {v.value}" for v in result.violations)

        return f"| {file_cell} | {status} | {details} |"

    @staticmethod
    def is_summary_body(body: str) -> bool:
        """Check whether a review body belongs to the validator's summary."""
        return (body or "").startswith(SUMMARY_TITLE)
