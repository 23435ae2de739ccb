"""
Flattening of the Jucer group tree into jucer_project_files() calls.

Groups are visited depth-first in document order. Files are accumulated per
group; whenever a subgroup is met the files collected so far are flushed as
one FileGroup, so the output keeps the exact interleaving of the document.
"""

from dataclasses import dataclass, field
from typing import Optional

from jucer2cmake.core.project import FileEntry, Group
from jucer2cmake.core.text import join


@dataclass
class FileGroup:
    """One flushed run of files belonging to a group."""

    # Group names from the main group down, joined with '/'
    full_name: str

    # Non-resource files, in document order
    files: list[str] = field(default_factory=list)

    # Subset of files that must not be compiled (HEADER_FILE_ONLY)
    do_not_compile: list[str] = field(default_factory=list)

    # Resource files, in document order
    resources: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.files and not self.resources


def flatten_groups(main_group: Optional[Group]) -> list[FileGroup]:
    """
    Flatten a group tree into an ordered list of FileGroups.

    Args:
        main_group: Root of the tree (MAINGROUP), or None.

    Returns:
        Non-empty FileGroups in emission order.
    """
    result: list[FileGroup] = []
    if main_group is None:
        return result

    group_names: list[str] = []

    def flush(current: FileGroup) -> FileGroup:
        if not current.is_empty:
            result.append(current)
        return FileGroup(current.full_name)

    def process_group(group: Group) -> None:
        group_names.append(group.name)
        current = FileGroup(join("/", group_names))

        for child in group.children:
            if isinstance(child, FileEntry):
                if child.resource:
                    current.resources.append(child.path)
                else:
                    current.files.append(child.path)
                    if child.do_not_compile:
                        current.do_not_compile.append(child.path)
            else:
                current = flush(current)
                process_group(child)

        flush(current)
        group_names.pop()

    process_group(main_group)
    return result


def format_file_group(file_group: FileGroup) -> list[str]:
    """
    Format one FileGroup as CMake lines.

    Returns:
        Lines for jucer_project_files() (plus set_source_files_properties()
        when needed) and jucer_project_resources(), each call followed by an
        empty line. Empty lists produce no call.
    """
    lines: list[str] = []

    if file_group.files:
        lines.append(f'jucer_project_files("{file_group.full_name}"')
        lines.extend(f'  "{path}"' for path in file_group.files)

        if file_group.do_not_compile:
            lines.append(")")
            lines.append("set_source_files_properties(")
            lines.extend(
                f'  "${{JUCER_PROJECT_DIR}}/{path}"'
                for path in file_group.do_not_compile
            )
            lines.append("  PROPERTIES HEADER_FILE_ONLY TRUE")

        lines.append(")")
        lines.append("")

    if file_group.resources:
        lines.append(f'jucer_project_resources("{file_group.full_name}"')
        lines.extend(f'  "{path}"' for path in file_group.resources)
        lines.append(")")
        lines.append("")

    return lines
