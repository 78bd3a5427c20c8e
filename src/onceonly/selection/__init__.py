"""File-list derivation and filtering."""

from .files import (
    apply_skip_filters,
    filter_file_list,
    filter_file_list_by_glob,
    require_existing_files,
    select_existing_files,
)

__all__ = [
    "apply_skip_filters",
    "filter_file_list",
    "filter_file_list_by_glob",
    "require_existing_files",
    "select_existing_files",
]
