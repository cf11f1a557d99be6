"""
Utilities Module for Terraform Resource Generation

This module provides file writing and string case conversion helpers.
"""

from .file_utils import get_relative_path, write_files_to_disk
from .string_case import (
    capitalcase,
    pascalcase,
    snakecase,
    titlecase,
)

__all__ = [
    "capitalcase",
    "get_relative_path",
    "pascalcase",
    "snakecase",
    "titlecase",
    "write_files_to_disk",
]
