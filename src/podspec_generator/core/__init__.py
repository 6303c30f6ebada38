"""Core utilities for podspec generation.

This package contains the value types, path validation and version
checks used by the podspec renderer and pipeline.
"""

from .paths import PodspecPathError, is_absolute_path, relativize_non_parent, validate_podspec_path
from .types import PathKind, PathRule, PodspecRequest
from .versions import check_numeric_version

__all__ = [
    "PathKind",
    "PathRule",
    "PodspecPathError",
    "PodspecRequest",
    "check_numeric_version",
    "is_absolute_path",
    "relativize_non_parent",
    "validate_podspec_path",
]
