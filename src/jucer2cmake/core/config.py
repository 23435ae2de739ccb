"""
Conversion configuration and the top-level convert() pipeline.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from jucer2cmake.errors import ValidationError, WriteError

OUTPUT_FILE_NAME = "CMakeLists.txt"


@dataclass
class ConversionConfig:
    """Configuration for one conversion run."""

    # Path to the .jucer project file
    jucer_file: Path

    # Path to Reprojucer.cmake (required unless juce6 is set)
    reprojucer_file: Optional[Path] = None

    # Directory receiving CMakeLists.txt (if None, use current directory)
    output_dir: Optional[Path] = None

    # Generate against JUCE 6's CMake API instead of Reprojucer
    juce6: bool = False

    def validate(self) -> list[str]:
        """
        Validate the configuration.

        Returns:
            List of validation error messages (empty if valid).
        """
        errors = []

        if not Path(self.jucer_file).is_file():
            errors.append(f"Jucer project file not found: {self.jucer_file}")

        if not self.juce6:
            if self.reprojucer_file is None:
                errors.append("A Reprojucer.cmake file is required")
            elif not Path(self.reprojucer_file).is_file():
                errors.append(
                    f"Reprojucer.cmake file not found: {self.reprojucer_file}"
                )

        if self.output_dir is not None and not Path(self.output_dir).is_dir():
            errors.append(f"Output directory not found: {self.output_dir}")

        return errors

    @property
    def output_path(self) -> Path:
        output_dir = self.output_dir if self.output_dir is not None else Path.cwd()
        return Path(output_dir) / OUTPUT_FILE_NAME


@dataclass
class ConversionResult:
    """Result of a conversion."""

    output_path: Path

    # Full names of the emitted file groups (Reprojucer mode only)
    file_groups: list[str] = field(default_factory=list)

    # Module ids, in declaration order (Reprojucer mode only)
    modules: list[str] = field(default_factory=list)

    # Display names of the emitted exporters (Reprojucer mode only)
    exporters: list[str] = field(default_factory=list)

    # Exporter tags present in the project but not supported (Reprojucer mode only)
    skipped_exporters: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"ConversionResult({self.output_path}: {len(self.file_groups)} file "
            f"groups, {len(self.modules)} modules, {len(self.exporters)} exporters)"
        )


def convert(config: ConversionConfig) -> ConversionResult:
    """
    Convert a Jucer project to a CMakeLists.txt.

    The script is generated completely before the output file is opened, so
    no file is written when any step fails.

    Args:
        config: Conversion configuration.

    Returns:
        ConversionResult describing what was written.

    Raises:
        ValidationError: If the configuration is invalid.
        ParseError: If the Jucer project cannot be read.
        ModuleError: If a module cannot be resolved.
        WriteError: If CMakeLists.txt cannot be written.
    """
    from jucer2cmake.core.juce6 import Juce6Writer
    from jucer2cmake.core.project import JucerProject
    from jucer2cmake.core.writer import ReprojucerWriter
    from jucer2cmake.exporters import skipped_exporters

    errors = config.validate()
    if errors:
        raise ValidationError(
            "Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors)
        )

    project = JucerProject.load(config.jucer_file)
    result = ConversionResult(output_path=config.output_path)

    if config.juce6:
        content = Juce6Writer(project).write()
    else:
        writer = ReprojucerWriter(
            project, Path(str(config.reprojucer_file)), config.output_dir
        )
        content = writer.write()
        result.file_groups = [group.full_name for group in writer.file_groups]
        result.modules = [module.id for module in writer.modules]
        result.exporters = list(writer.exporters)
        result.skipped_exporters = skipped_exporters(project)

    try:
        config.output_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"Cannot write {config.output_path}: {e.strerror}") from e
    return result
