"""Podspec generation pipeline.

This module ties configuration to rendering: it derives the podspec-relative
paths from the configured build directories, runs the version check,
renders the podspec and writes it next to the build outputs.
"""

import logging
from pathlib import Path

from .config import PodspecConfig
from .core.paths import relativize_non_parent
from .core.types import PodspecRequest
from .core.versions import check_numeric_version
from .renderer import render_podspec

logger = logging.getLogger(__name__)

# iOS packed libraries are shared with watchOS
IOS_RELEASE_LIB_DIR = "iosRelease"


class PodspecPipeline:
    """Generates the podspec for one project.

    Podspecs should be located at the root of the pod and every file pattern
    is relative to that location, so all content paths are expressed
    relative to ``dest_podspec_dir`` and may not traverse its parent.

    Example:
        >>> pipeline = PodspecPipeline(load_config(Path('podspec.json')))
        >>> pipeline.write()
    """

    def __init__(self, config: PodspecConfig):
        self.config = config

    @property
    def podspec_path(self) -> Path:
        return self.config.dest_podspec_dir / f"{self.config.pod_name}.podspec"

    @property
    def library_name(self) -> str:
        return f"{self.config.project_name}-j2objc"

    def build_request(self) -> PodspecRequest:
        """Collect the paths and metadata for rendering.

        Returns:
            PodspecRequest built from the config

        Raises:
            PodspecPathError: If a build directory lies outside the podspec directory
            ConfigError: If the J2ObjC home can't be located
        """
        config = self.config
        podspec_dir = config.dest_podspec_dir

        resource_path = relativize_non_parent(podspec_dir, config.dest_src_main_resources_dir)
        headers_path = relativize_non_parent(podspec_dir, config.dest_src_main_objc_dir)
        lib_dir_ios = relativize_non_parent(podspec_dir, config.dest_lib_dir / IOS_RELEASE_LIB_DIR)

        check_numeric_version(config.min_version_ios, "minVersionIos")

        return PodspecRequest(
            pod_name=config.pod_name,
            public_headers_path=headers_path,
            resource_path=resource_path,
            library_dir_path=lib_dir_ios,
            min_ios_version=config.min_version_ios,
            library_name=self.library_name,
            toolchain_home=config.resolve_j2objc_home(),
            author=config.pod_author,
            license=config.pod_license,
            homepage_url=config.pod_homepage_url,
            source_url=config.pod_source_url,
            version=config.pod_version,
        )

    def render(self) -> str:
        return render_podspec(self.build_request())

    def write(self) -> Path:
        """Render the podspec and write it to ``podspec_path``.

        Any existing podspec is replaced. Nothing is written if rendering
        fails.

        Returns:
            Path of the written podspec
        """
        contents = self.render()

        podspec = self.podspec_path
        podspec.parent.mkdir(parents=True, exist_ok=True)

        if podspec.exists():
            podspec.unlink()

        logger.debug("Writing podspec... %s", podspec)
        with podspec.open("w", encoding="utf-8", newline="\n") as f:
            f.write(contents)

        return podspec
