"""Best-effort numeric version checks."""

import logging
import re

logger = logging.getLogger(__name__)

# Requires at least a major and minor version number
NUMERIC_VERSION_RE = re.compile(r"^[0-9]*(\.[0-9]+)+$")


def check_numeric_version(version: str, field_label: str) -> str | None:
    """Warn when a version string doesn't look numeric.

    An empty version is accepted without checking. The warning never
    blocks podspec generation.

    Args:
        version: Version string, e.g. "8.0"
        field_label: Name of the config field the version came from

    Returns:
        The warning message, or None if the version is acceptable
    """
    if version == "":
        return None
    if NUMERIC_VERSION_RE.match(version):
        return None

    warning = f"Non-numeric version for {field_label}: {version}"
    logger.warning(warning)
    return warning
