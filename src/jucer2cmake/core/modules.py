"""
Module resolution and option discovery for jucer_project_module() calls.

Each JUCE module declares its configurable options in its public header:

    /** Config: JUCE_USE_CURL
        Enables http/https support via libcurl (Linux only).
    */

The identifier following the marker is an option; its value comes from the
project's JUCEOPTIONS node.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from jucer2cmake.errors import ModuleError

CONFIG_MARKER = "/** Config: "

# Marker followed by the option identifier; the rest of the line is ignored
CONFIG_PATTERN = re.compile(r"^" + re.escape(CONFIG_MARKER) + r"(\w+)")


@dataclass
class ModuleReference:
    """A declared module with its resolved search path."""

    # Module id, e.g. 'juce_core'
    id: str

    # Module folder relative to the .jucer directory, e.g. '../../modules'
    path: str

    # Option identifiers in header order (duplicates kept)
    options: list[str] = field(default_factory=list)

    def header_path(self, project_dir: Path) -> Path:
        """Path of the module's public header, <path>/<id>/<id>.h."""
        return project_dir / self.path / self.id / f"{self.id}.h"


def scan_module_options(header_path: Path) -> list[str]:
    """
    List the options declared in a module header.

    Args:
        header_path: Path to the module's public header.

    Returns:
        Option identifiers in the order they appear.

    Raises:
        ModuleError: If the header cannot be read.
    """
    try:
        content = header_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ModuleError(
            f"Cannot read module header {header_path}: {e.strerror}"
        ) from e

    options = []
    for line in content.splitlines():
        match = CONFIG_PATTERN.match(line)
        if match:
            options.append(match.group(1))
    return options


def resolve_modules(
    module_ids: list[str],
    module_paths: dict[str, str],
    project_dir: Path,
) -> list[ModuleReference]:
    """
    Resolve module paths and scan their headers for options.

    Args:
        module_ids: Declared module ids, in declaration order.
        module_paths: Module id -> relative path (first exporter's MODULEPATHS).
        project_dir: Directory of the .jucer file.

    Returns:
        One ModuleReference per module, in declaration order.

    Raises:
        ModuleError: If a module has no path or its header cannot be read.
    """
    modules = []
    for module_id in module_ids:
        if module_id not in module_paths:
            raise ModuleError(f"No module path declared for module '{module_id}'")

        module = ModuleReference(id=module_id, path=module_paths[module_id])
        module.options = scan_module_options(module.header_path(project_dir))
        modules.append(module)
    return modules


def format_option(option: str, value: Optional[str]) -> str:
    if value == "enabled":
        return f"{option} ON"
    if value == "disabled":
        return f"{option} OFF"
    return f"# {option}"


def format_module(module: ModuleReference, options: dict[str, str]) -> list[str]:
    """
    Format a jucer_project_module() call.

    Args:
        module: Resolved module.
        options: Project-wide option overrides (JUCEOPTIONS).
    """
    lines = [
        "jucer_project_module(",
        f"  {module.id}",
        f'  PATH "{module.path}"',
    ]
    lines.extend(
        f"  {format_option(option, options.get(option))}" for option in module.options
    )
    lines.append(")")
    lines.append("")
    return lines
