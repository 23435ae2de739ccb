"""
Base class for export targets.

An export target turns one child of EXPORTFORMATS into a
jucer_export_target() call followed by one
jucer_export_target_configuration() call per configuration.
"""

import os
from pathlib import Path

from jucer2cmake.core.project import Configuration, Exporter, JucerProject
from jucer2cmake.core.settings import get_setting
from jucer2cmake.core.text import escape_path, join, split

VST3_HOST_MODULE = "juce_audio_processors"
VST3_HOST_OPTION = "JUCE_PLUGINHOST_VST3"


def resolve_header_paths(
    header_path: str, project_dir: Path, target_folder: str
) -> list[str]:
    """
    Re-express exporter header search paths relative to the .jucer directory.

    Args:
        header_path: Newline-separated paths, relative to the exporter's
                     target folder.
        project_dir: Directory of the .jucer file.
        target_folder: Exporter target folder, relative to project_dir.

    Returns:
        Paths relative to project_dir, empty segments dropped.
    """
    target_dir = os.path.join(project_dir, target_folder)
    paths = []
    for path in split("\n", header_path):
        if not path:
            continue
        absolute = os.path.normpath(os.path.join(target_dir, path))
        paths.append(os.path.relpath(absolute, project_dir))
    return paths


class ExportTarget:
    """One supported exporter (Xcode, Visual Studio, ...)."""

    # Tag of the exporter node under EXPORTFORMATS
    name: str = "base"

    # Name passed to jucer_export_target()
    display_name: str = ""

    # VST3 SDK location used when the exporter does not set vst3Folder
    default_vst3_folder: str = ""

    def write(self, project: JucerProject, exporter: Exporter) -> list[str]:
        """Format the target call and all of its configuration calls."""
        lines = self.format_target(project, exporter)
        for configuration in exporter.configurations():
            lines.extend(self.format_configuration(project, exporter, configuration))
        return lines

    def format_target(self, project: JucerProject, exporter: Exporter) -> list[str]:
        lines = [
            "jucer_export_target(",
            f'  "{self.display_name}"',
        ]

        if self.uses_vst3_host(project):
            vst3_folder = exporter.vst3_folder or self.default_vst3_folder
            lines.append(f'  VST3_SDK_FOLDER "{escape_path(vst3_folder)}"')

        settings = [
            ("EXTRA_PREPROCESSOR_DEFINITIONS", "extraDefs"),
            ("EXTRA_COMPILER_FLAGS", "extraCompilerFlags"),
        ]
        for cmake_tag, attribute in settings:
            lines.append("  " + get_setting(exporter.node, cmake_tag, attribute))

        lines.append(")")
        lines.append("")
        return lines

    def format_configuration(
        self,
        project: JucerProject,
        exporter: Exporter,
        configuration: Configuration,
    ) -> list[str]:
        lines = [
            "jucer_export_target_configuration(",
            f'  "{self.display_name}"',
            f'  NAME "{configuration.name}"',
        ]

        if not configuration.header_path:
            lines.append("  # HEADER_SEARCH_PATHS")
        else:
            paths = resolve_header_paths(
                configuration.header_path, project.directory, exporter.target_folder
            )
            header_paths = escape_path(join("\n", paths))
            lines.append(f'  HEADER_SEARCH_PATHS "{header_paths}"')

        defines = get_setting(configuration.node, "PREPROCESSOR_DEFINITIONS", "defines")
        lines.append(f"  {defines}")
        lines.extend(
            f"  {line}" for line in self.configuration_settings(configuration)
        )
        lines.append(")")
        lines.append("")
        return lines

    def configuration_settings(self, configuration: Configuration) -> list[str]:
        """Exporter-specific configuration settings (none by default)."""
        return []

    @staticmethod
    def uses_vst3_host(project: JucerProject) -> bool:
        """True when the project hosts VST3 plug-ins and needs the SDK path."""
        return (
            project.has_module(VST3_HOST_MODULE)
            and project.options().get(VST3_HOST_OPTION) == "enabled"
        )
