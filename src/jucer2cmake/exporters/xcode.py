"""
Xcode (MacOSX) export target.

Adds the base SDK and deployment target selectors to each configuration.
"""

from jucer2cmake.core.project import Configuration
from jucer2cmake.exporters.base import ExportTarget

# SDK versions accepted by Reprojucer, oldest first
OSX_SDKS = (
    "10.5 SDK",
    "10.6 SDK",
    "10.7 SDK",
    "10.8 SDK",
    "10.9 SDK",
    "10.10 SDK",
    "10.11 SDK",
    "10.12 SDK",
)

USE_DEFAULT = "Use Default"


def format_osx_sdk(cmake_tag: str, value: str, strip_suffix: bool = False) -> str:
    """
    Format an SDK selector.

    Args:
        cmake_tag: OSX_BASE_SDK_VERSION or OSX_DEPLOYMENT_TARGET.
        value: Attribute value, e.g. '10.11 SDK' or 'default'.
        strip_suffix: Drop the trailing ' SDK' ('10.11 SDK' -> '10.11').
    """
    if value == "default":
        return f'{cmake_tag} "{USE_DEFAULT}"'
    if value in OSX_SDKS:
        if strip_suffix:
            value = value[: -len(" SDK")]
        return f'{cmake_tag} "{value}"'
    return f"# {cmake_tag}"


class XcodeMacTarget(ExportTarget):
    """Xcode project for macOS."""

    name = "XCODE_MAC"
    display_name = "Xcode (MacOSX)"
    default_vst3_folder = "~/SDKs/VST_SDK/VST3_SDK"

    def configuration_settings(self, configuration: Configuration) -> list[str]:
        return [
            format_osx_sdk("OSX_BASE_SDK_VERSION", configuration.osx_sdk),
            format_osx_sdk(
                "OSX_DEPLOYMENT_TARGET",
                configuration.osx_compatibility,
                strip_suffix=True,
            ),
        ]
