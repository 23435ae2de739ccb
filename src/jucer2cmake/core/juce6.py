"""
CMakeLists.txt generation against JUCE 6's own CMake API.

Unlike ReprojucerWriter this needs no companion CMake library: the script
finds an installed JUCE package and declares a single target with
juce_add_gui_app(), juce_add_console_app() or juce_add_plugin().
"""

from jucer2cmake.core.project import JucerProject
from jucer2cmake.errors import ValidationError

# projectType -> JUCE 6 target function
JUCE_ADD_FUNCTIONS = {
    "guiapp": "juce_add_gui_app",
    "consoleapp": "juce_add_console_app",
    "audioplug": "juce_add_plugin",
}

DEFAULT_VERSION = "1.0.0"
PLUGIN_FORMATS = ("AU", "VST3", "Standalone")


class Juce6Writer:
    """Generate a JUCE 6 CMakeLists.txt from a Jucer project."""

    def __init__(self, project: JucerProject):
        self.project = project

    @property
    def cmake_minimum_version(self) -> str:
        return "3.15" if self.project.project_type == "audioplug" else "3.12"

    def write(self) -> str:
        """
        Generate the whole script.

        VERSION is the project's own version attribute, falling back to
        1.0.0 only when the project declares none. Jucer2CMake's C++ tool
        always wrote 1.0.0 here.

        Raises:
            ValidationError: If the project type has no JUCE 6 target function.
        """
        project_type = self.project.project_type
        juce_add_function = JUCE_ADD_FUNCTIONS.get(project_type)
        if juce_add_function is None:
            raise ValidationError(
                f"Project type '{project_type}' is not supported in JUCE 6 mode. "
                f"Supported: {', '.join(JUCE_ADD_FUNCTIONS)}"
            )

        target_name = self.project.name
        version = self.project.version or DEFAULT_VERSION

        lines = [
            "",
            f"cmake_minimum_required(VERSION {self.cmake_minimum_version})",
            "",
            f'project("{target_name}")',
            "",
            "",
            "find_package(JUCE CONFIG REQUIRED)",
            "",
            "",
            f"{juce_add_function}({target_name}",
            f'  VERSION "{version}"',
        ]
        if project_type == "audioplug":
            formats = " ".join(f'"{fmt}"' for fmt in PLUGIN_FORMATS)
            lines.append(f"  FORMATS {formats}")
        lines.extend(
            [
                ")",
                "",
                f"juce_generate_juce_header({target_name})",
            ]
        )

        return "\n".join(lines) + "\n"
