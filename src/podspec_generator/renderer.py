"""Podspec rendering.

Produces the CocoaPods podspec text for a J2ObjC-translated library. The
output is consumed by `pod install`, so field order and literals are kept
stable. For the podspec DSL see https://guides.cocoapods.org/syntax/podspec.html
"""

from .core.paths import validate_podspec_path
from .core.types import PathKind, PodspecRequest

SUMMARY = "Generated by the J2ObjC Gradle Plugin."

# TODO: allow a custom list of libraries from config
SYSTEM_LIBRARIES = ("ObjC", "guava", "javax_inject", "jre_emul", "jsr305", "z", "icucore")

PREPARE_SCRIPT = "download_distribution.sh"


def pods_root_reference(pod_name: str) -> str:
    """Return the token CocoaPods replaces with the pod's install directory."""
    return f"$(PODS_ROOT)/{pod_name}"


def render_podspec(request: PodspecRequest) -> str:
    """Render the podspec for a request.

    All paths are validated first; nothing is rendered if any of them is
    rejected.

    Args:
        request: Paths and metadata for the pod

    Returns:
        Podspec text with '\\n' line endings

    Raises:
        PodspecPathError: If a path would produce an invalid podspec
    """
    # Relative paths for content referenced by CocoaPods
    validate_podspec_path(request.library_dir_path, PathKind.RELATIVE_REQUIRED)
    validate_podspec_path(request.resource_path, PathKind.RELATIVE_REQUIRED)

    # Absolute path for the Xcode command line
    validate_podspec_path(request.toolchain_home, PathKind.ABSOLUTE_REQUIRED)
    validate_podspec_path(request.public_headers_path, PathKind.RELATIVE_REQUIRED)

    pods_dir = pods_root_reference(request.pod_name)
    libraries = ", ".join(f"'{lib}'" for lib in SYSTEM_LIBRARIES)

    lines = [
        "Pod::Spec.new do |s|",
        f"    s.name = '{request.pod_name}'",
        f"    s.version = '{request.version}'",
        f"    s.summary = '{SUMMARY}'",
        f"    s.homepage = '{request.homepage_url}'",
        f"    s.license = '{request.license}'",
        f"    s.author = '{request.author}'",
        f"    s.source = {{ :git => '{request.source_url}', :tag => s.version.to_s }}",
        f"    s.resources = '{request.resource_path}/**/*'",
        "    s.requires_arc = true",
        f"    s.libraries = {libraries}",
        "    s.xcconfig = {",
        f"        'HEADER_SEARCH_PATHS' => '{pods_dir}/j2objc/include {pods_dir}/{request.public_headers_path}'",
        "    }",
        "    s.ios.xcconfig = {",
        f"        'LIBRARY_SEARCH_PATHS' => '{pods_dir}/j2objc/lib'",
        "    }",
        f"    s.ios.deployment_target = '{request.min_ios_version}'",
        f"    s.ios.vendored_libraries = '{request.library_dir_path}/lib{request.library_name}.a'",
        "    s.prepare_command = <<-CMD",
        f"        ./{PREPARE_SCRIPT}",
        "    CMD",
        "    s.preserve_paths = 'j2objc', 'src'",
        "    s.header_mappings_dir = 'j2objc/include'",
        "end",
    ]
    return "\n".join(lines) + "\n"
