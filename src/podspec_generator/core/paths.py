"""Path validation for podspec content.

CocoaPods resolves every file pattern against the directory holding the
podspec and silently mis-resolves doubled separators, trailing separators
and parent traversal. These checks turn such paths into an early error.
See https://guides.cocoapods.org/syntax/podspec.html#group_file_patterns
"""

import os
import posixpath
import sys
from pathlib import Path

from .types import PathKind, PathRule

WINDOWS_DRIVE_PREFIX = "C:\\"


class PodspecPathError(ValueError):
    """Raised when a path would produce an invalid podspec.

    Attributes:
        path: The offending path string
        rule: The rule the path violated
    """

    def __init__(self, path: str, rule: PathRule, message: str):
        super().__init__(message)
        self.path = path
        self.rule = rule


def has_double_slash(path: str) -> bool:
    return "//" in path


def has_trailing_slash(path: str) -> bool:
    return path.endswith("/")


def has_trailing_wildcard(path: str) -> bool:
    return path.endswith("*")


def traverses_parent(path: str) -> bool:
    return path.startswith("../")


def is_absolute_path(path: str, windows: bool | None = None) -> bool:
    """Check whether a path is absolute under the host's conventions.

    A leading '/' is always absolute. A 'C:\\' prefix only counts on
    Windows, so that unit tests run there accept their own temp directories.

    Args:
        path: Path string to classify
        windows: Override host detection (defaults to ``sys.platform``)

    Returns:
        True if the path is absolute
    """
    if windows is None:
        windows = sys.platform == "win32"
    return path.startswith("/") or (windows and path.startswith(WINDOWS_DRIVE_PREFIX))


def validate_podspec_path(path: str, kind: PathKind, windows: bool | None = None) -> None:
    """Validate a path before it is allowed into a podspec.

    Rules are checked in a fixed order and the first violation wins.

    Args:
        path: Path string to validate
        kind: Whether the podspec requires a relative or an absolute path
        windows: Override host detection for the drive-letter check

    Raises:
        PodspecPathError: If any rule is violated
    """
    if has_double_slash(path):
        raise PodspecPathError(path, PathRule.NO_DOUBLE_SLASH, f"Path shouldn't have '//': {path}")
    if has_trailing_slash(path):
        raise PodspecPathError(path, PathRule.NO_TRAILING_SLASH, f"Path shouldn't end with '/': {path}")
    if has_trailing_wildcard(path):
        raise PodspecPathError(
            path, PathRule.NO_TRAILING_WILDCARD, f"Only the podspec renderer should add '*': {path}"
        )

    absolute = is_absolute_path(path, windows=windows)
    relative_required = kind is PathKind.RELATIVE_REQUIRED

    if relative_required and absolute:
        raise PodspecPathError(path, PathRule.MUST_BE_RELATIVE, f"Path shouldn't be absolute: {path}")
    if not relative_required and not absolute:
        raise PodspecPathError(path, PathRule.MUST_BE_ABSOLUTE, f"Path shouldn't be relative: {path}")
    if relative_required and traverses_parent(path):
        raise PodspecPathError(path, PathRule.NO_PARENT_TRAVERSAL, f"Path can't traverse parent: {path}")


def relativize_non_parent(base_dir: Path, target: Path) -> str:
    """Express ``target`` relative to ``base_dir`` without leaving it.

    Args:
        base_dir: Directory the result is relative to (the podspec directory)
        target: Directory or file to reference from the podspec

    Returns:
        Relative path using '/' separators

    Raises:
        PodspecPathError: If ``target`` is not inside ``base_dir``
    """
    relative = os.path.relpath(os.path.abspath(target), os.path.abspath(base_dir))
    relative = relative.replace(os.sep, "/")
    if relative == ".." or relative.startswith("../"):
        raise PodspecPathError(
            relative,
            PathRule.NO_PARENT_TRAVERSAL,
            f"Path can't traverse parent: {relative} (from {base_dir} to {target})",
        )
    return posixpath.normpath(relative)
