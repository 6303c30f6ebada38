"""Type definitions for podspec generation.

This module defines the value objects passed between the path validator,
the version advisor and the podspec renderer.
"""

from dataclasses import dataclass
from enum import Enum


class PathKind(Enum):
    """Selects which rule a podspec path must satisfy."""

    RELATIVE_REQUIRED = "relative_required"
    ABSOLUTE_REQUIRED = "absolute_required"


class PathRule(Enum):
    """Rules enforced on paths before they are written into a podspec."""

    NO_DOUBLE_SLASH = "no-double-slash"
    NO_TRAILING_SLASH = "no-trailing-slash"
    NO_TRAILING_WILDCARD = "no-trailing-wildcard"
    MUST_BE_RELATIVE = "must-be-relative"
    MUST_BE_ABSOLUTE = "must-be-absolute"
    NO_PARENT_TRAVERSAL = "no-parent-traversal"


@dataclass(frozen=True)
class PodspecRequest:
    """Everything needed to render a single podspec.

    Paths for content referenced by CocoaPods (headers, resources, library
    directory) are relative to the podspec file. ``toolchain_home`` is an
    absolute path handed to the Xcode command line.
    """

    pod_name: str
    public_headers_path: str
    resource_path: str
    library_dir_path: str
    min_ios_version: str
    library_name: str
    toolchain_home: str
    author: str = ""
    license: str = ""
    homepage_url: str = ""
    source_url: str = ""
    version: str = ""
