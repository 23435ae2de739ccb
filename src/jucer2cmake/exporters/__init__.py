"""
Export targets supported by jucer2cmake.

EXPORTERS is the fixed, ordered table of supported exporters. Generated
scripts always list exporters in this order, whatever their order in the
Jucer project.
"""

from typing import Optional

from jucer2cmake.core.project import Exporter, JucerProject
from jucer2cmake.exporters.base import ExportTarget
from jucer2cmake.exporters.visual_studio import (
    VisualStudio2013Target,
    VisualStudio2015Target,
)
from jucer2cmake.exporters.xcode import XcodeMacTarget


# To add an exporter:
#   1. Create a class extending ExportTarget (name, display_name,
#      default_vst3_folder, optional configuration_settings())
#   2. Insert an instance here, at the position it should be written
EXPORTERS: tuple[ExportTarget, ...] = (
    XcodeMacTarget(),
    VisualStudio2015Target(),
    VisualStudio2013Target(),
)


def get_exporter(name: str) -> Optional[ExportTarget]:
    """
    Get a supported exporter by its EXPORTFORMATS tag.

    Returns:
        The ExportTarget, or None if the tag is not supported.
    """
    for export_target in EXPORTERS:
        if export_target.name == name:
            return export_target
    return None


def list_exporters() -> list[str]:
    """List supported exporter tags in emission order."""
    return [export_target.name for export_target in EXPORTERS]


def present_exporters(project: JucerProject) -> list[tuple[ExportTarget, Exporter]]:
    """
    Pair each supported exporter with its node in the project.

    Returns:
        (ExportTarget, Exporter) pairs in table order; exporters missing
        from the project, and unsupported ones, are left out.
    """
    present = []
    for name in list_exporters():
        exporter = project.exporter(name)
        if exporter is not None:
            present.append((get_exporter(name), exporter))
    return present


def skipped_exporters(project: JucerProject) -> list[str]:
    """Tags of the project's exporters that have no supported ExportTarget."""
    return [
        exporter.tag
        for exporter in project.exporters()
        if get_exporter(exporter.tag) is None
    ]


def write_exporters(project: JucerProject) -> list[str]:
    """Format every supported exporter present in the project, in table order."""
    lines: list[str] = []
    for export_target, exporter in present_exporters(project):
        lines.extend(export_target.write(project, exporter))
    return lines


__all__ = [
    "ExportTarget",
    "XcodeMacTarget",
    "VisualStudio2015Target",
    "VisualStudio2013Target",
    "EXPORTERS",
    "get_exporter",
    "list_exporters",
    "present_exporters",
    "skipped_exporters",
    "write_exporters",
]
