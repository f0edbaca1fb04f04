"""
Summary: Expose the file enumerator and its eligibility predicates.
Why: Give the session and line-count entry points one import surface.
"""

from .enumerator import enumerate_eligible_files, iter_eligible_files
from .file_filter import is_eligible_relative_path, is_excluded_dir_name, is_excluded_file_name

__all__ = [
    "enumerate_eligible_files",
    "is_eligible_relative_path",
    "is_excluded_dir_name",
    "is_excluded_file_name",
    "iter_eligible_files",
]
