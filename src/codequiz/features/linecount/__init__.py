"""
Summary: Expose the eligible line-count reporter.
Why: Keep the alternate entry point separate from the quiz loop.
"""

from .reporter import LineCountReport, build_line_count_report

__all__ = ["LineCountReport", "build_line_count_report"]
