"""
CMakeLists.txt generation against the Reprojucer function library.

The script is built in memory in a fixed order:

    preamble -> include(Reprojucer) -> <jucer>_FILE check
    -> jucer_project_begin() -> jucer_project_settings()
    [-> jucer_audio_plugin_settings()] -> jucer_project_files/resources()
    -> jucer_project_module() -> jucer_export_target[_configuration]()
    -> jucer_project_end()

Preamble sections are followed by two empty lines, every jucer_* call by one.
"""

import os
from pathlib import Path
from typing import Optional

from jucer2cmake.core.groups import FileGroup, flatten_groups, format_file_group
from jucer2cmake.core.modules import ModuleReference, format_module, resolve_modules
from jucer2cmake.core.project import JucerProject
from jucer2cmake.core.settings import get_on_off_setting, get_setting
from jucer2cmake.core.text import sanitize_identifier
from jucer2cmake.exporters import present_exporters, write_exporters

CMAKE_MINIMUM_VERSION = "3.4"

# (CMake tag, attribute) for jucer_project_settings(); PROJECT_TYPE and the
# remaining settings are written by ReprojucerWriter._project_settings()
PROJECT_SETTINGS = (
    ("PROJECT_NAME", "name"),
    ("PROJECT_VERSION", "version"),
    ("COMPANY_NAME", "companyName"),
    ("COMPANY_WEBSITE", "companyWebsite"),
    ("COMPANY_EMAIL", "companyEmail"),
)

# (CMake tag, attribute, ON/OFF setting) for jucer_audio_plugin_settings()
PLUGIN_SETTINGS = (
    ("BUILD_VST", "buildVST", True),
    ("BUILD_AUDIOUNIT", "buildAU", True),
    ("PLUGIN_NAME", "pluginName", False),
    ("PLUGIN_DESCRIPTION", "pluginDesc", False),
    ("PLUGIN_MANUFACTURER", "pluginManufacturer", False),
    ("PLUGIN_MANUFACTURER_CODE", "pluginManufacturerCode", False),
    ("PLUGIN_CODE", "pluginCode", False),
    ("PLUGIN_CHANNEL_CONFIGURATIONS", "pluginChannelConfigs", False),
    ("PLUGIN_IS_A_SYNTH", "pluginIsSynth", True),
    ("PLUGIN_MIDI_INPUT", "pluginWantsMidiIn", True),
    ("PLUGIN_MIDI_OUTPUT", "pluginProducesMidiOut", True),
    ("MIDI_EFFECT_PLUGIN", "pluginIsMidiEffectPlugin", True),
    ("KEY_FOCUS", "pluginEditorRequiresKeys", True),
    ("PLUGIN_AU_EXPORT_PREFIX", "pluginAUExportPrefix", False),
    ("PLUGIN_AU_MAIN_TYPE", "pluginAUMainType", False),
    ("VST_CATEGORY", "pluginVSTCategory", False),
)


class ReprojucerWriter:
    """Generate a Reprojucer-based CMakeLists.txt from a Jucer project."""

    def __init__(
        self,
        project: JucerProject,
        reprojucer_file: Path,
        output_dir: Optional[Path] = None,
    ):
        """
        Initialize writer.

        Args:
            project: The loaded Jucer project.
            reprojucer_file: Path to Reprojucer.cmake; its directory is added
                             to CMAKE_MODULE_PATH.
            output_dir: Directory the CMakeLists.txt is written to (default:
                        current directory). Used to relativize the
                        Reprojucer path.
        """
        self.project = project
        self.reprojucer_file = Path(reprojucer_file)
        self.output_dir = Path(output_dir) if output_dir is not None else Path.cwd()

        # Filled in by write()
        self.file_groups: list[FileGroup] = []
        self.modules: list[ModuleReference] = []
        self.exporters: list[str] = []

    def write(self) -> str:
        """
        Generate the whole script.

        Returns:
            CMakeLists.txt content.

        Raises:
            ModuleError: If a module cannot be resolved.
        """
        self.file_groups = flatten_groups(self.project.main_group())
        self.modules = resolve_modules(
            self.project.module_ids(),
            self.project.module_paths(),
            self.project.directory,
        )
        self.exporters = [
            export_target.display_name
            for export_target, _ in present_exporters(self.project)
        ]

        lines: list[str] = []
        lines.extend(self._preamble())
        lines.extend(self._include_reprojucer())
        lines.extend(self._project_file_check())
        lines.extend(self._project_begin())
        lines.extend(self._project_settings())
        if self.project.project_type == "audioplug":
            lines.extend(self._audio_plugin_settings())

        for file_group in self.file_groups:
            lines.extend(format_file_group(file_group))

        options = self.project.options()
        for module in self.modules:
            lines.extend(format_module(module, options))

        lines.extend(write_exporters(self.project))
        lines.append("jucer_project_end()")

        return "\n".join(lines) + "\n"

    @property
    def file_variable(self) -> str:
        """CMake variable holding the .jucer path, e.g. 'MyApp_jucer_FILE'."""
        return sanitize_identifier(self.project.file_name) + "_FILE"

    def _preamble(self) -> list[str]:
        return [
            f"# This file was generated by Jucer2CMake from {self.project.file_name}",
            "",
            f"cmake_minimum_required(VERSION {CMAKE_MINIMUM_VERSION})",
            "",
            "",
        ]

    def _include_reprojucer(self) -> list[str]:
        reprojucer_dir = os.path.relpath(
            os.path.abspath(self.reprojucer_file.parent),
            os.path.abspath(self.output_dir),
        ).replace("\\", "/")
        module_path = "${CMAKE_CURRENT_LIST_DIR}/" + reprojucer_dir
        return [
            f'list(APPEND CMAKE_MODULE_PATH "{module_path}")',
            "include(Reprojucer)",
            "",
            "",
        ]

    def _project_file_check(self) -> list[str]:
        var = self.file_variable
        return [
            f"if(NOT DEFINED {var})",
            f'  message(FATAL_ERROR "{var} must be defined")',
            "endif()",
            "",
            f"get_filename_component({var}",
            f'  "${{{var}}}" ABSOLUTE',
            '  BASE_DIR "${CMAKE_BINARY_DIR}"',
            ")",
            "",
            "",
        ]

    def _project_begin(self) -> list[str]:
        return [
            "jucer_project_begin(",
            f'  PROJECT_FILE "${{{self.file_variable}}}"',
            "  " + get_setting(self.project.node, "PROJECT_ID", "id"),
            ")",
            "",
        ]

    def _project_settings(self) -> list[str]:
        node = self.project.node
        lines = ["jucer_project_settings("]
        lines.extend(
            "  " + get_setting(node, cmake_tag, attribute)
            for cmake_tag, attribute in PROJECT_SETTINGS
        )
        lines.extend(
            [
                f'  PROJECT_TYPE "{self.project.project_type_description}"',
                "  " + get_setting(node, "BUNDLE_IDENTIFIER", "bundleIdentifier"),
                '  BINARYDATACPP_SIZE_LIMIT "Default"',
                "  "
                + get_setting(node, "BINARYDATA_NAMESPACE", "binaryDataNamespace"),
                "  " + get_setting(node, "PREPROCESSOR_DEFINITIONS", "defines"),
                ")",
                "",
            ]
        )
        return lines

    def _audio_plugin_settings(self) -> list[str]:
        node = self.project.node
        lines = ["jucer_audio_plugin_settings("]
        for cmake_tag, attribute, is_on_off in PLUGIN_SETTINGS:
            if is_on_off:
                lines.append("  " + get_on_off_setting(node, cmake_tag, attribute))
            else:
                lines.append("  " + get_setting(node, cmake_tag, attribute))
        lines.append(")")
        lines.append("")
        return lines
