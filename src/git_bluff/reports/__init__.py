"""Report rendering for git-bluff."""

from .text_report import Report, generate_report, generate_report_with_config

__all__ = ["Report", "generate_report", "generate_report_with_config"]
