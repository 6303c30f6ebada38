"""Podspec Generator.

This package renders CocoaPods podspecs for libraries produced by J2ObjC,
validating every path before it is written into the podspec.
"""

from .cli import main
from .config import ConfigError, PodspecConfig, load_config
from .core import (
    PathKind,
    PathRule,
    PodspecPathError,
    PodspecRequest,
    check_numeric_version,
    is_absolute_path,
    relativize_non_parent,
    validate_podspec_path,
)
from .pipeline import PodspecPipeline
from .renderer import render_podspec

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "PathKind",
    "PathRule",
    "PodspecConfig",
    "PodspecPathError",
    "PodspecPipeline",
    "PodspecRequest",
    "check_numeric_version",
    "is_absolute_path",
    "load_config",
    "main",
    "relativize_non_parent",
    "render_podspec",
    "validate_podspec_path",
]
