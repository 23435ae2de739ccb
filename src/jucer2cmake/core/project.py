"""
Typed reader over a parsed Jucer project.

A Jucer project is an XML document rooted at JUCERPROJECT:

    JUCERPROJECT  (name, version, projectType, companyName, ...)
      MAINGROUP   GROUP/FILE tree
      MODULES     MODULE id=...
      EXPORTFORMATS
        XCODE_MAC / VS2015 / ...  (targetFolder, vst3Folder, extraDefs, ...)
          MODULEPATHS     MODULEPATH id=... path=...
          CONFIGURATIONS  CONFIGURATION name=... headerPath=... defines=...
      JUCEOPTIONS  (JUCE_xxx="enabled" | "disabled" | "default")
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from jucer2cmake.core.document import Node, load_document
from jucer2cmake.core.settings import to_int
from jucer2cmake.errors import ParseError

PROJECT_TAG = "JUCERPROJECT"

# projectType attribute -> PROJECT_TYPE value understood by Reprojucer
PROJECT_TYPE_DESCRIPTIONS = {
    "guiapp": "GUI Application",
    "consoleapp": "Console Application",
    "library": "Static Library",
    "audioplug": "Audio Plug-in",
}


@dataclass
class FileEntry:
    """A FILE leaf of the group tree."""

    # Path relative to the .jucer file
    path: str

    # resource="1"
    resource: bool = False

    # Value of the compile attribute, None when absent
    compile: Optional[int] = None

    @property
    def do_not_compile(self) -> bool:
        """True for a .cpp source explicitly marked compile="0"."""
        return (
            not self.resource
            and self.compile == 0
            and Path(self.path).suffix.lower() == ".cpp"
        )

    @classmethod
    def from_node(cls, node: Node) -> "FileEntry":
        compile_value = node.get("compile")
        return cls(
            path=node.get("file") or "",
            resource=to_int(node.get("resource")) == 1,
            compile=to_int(compile_value) if compile_value is not None else None,
        )


@dataclass
class Group:
    """A GROUP (or MAINGROUP) node with its ordered children."""

    name: str
    children: list[Union["Group", FileEntry]] = field(default_factory=list)

    @classmethod
    def from_node(cls, node: Node) -> "Group":
        children: list[Union[Group, FileEntry]] = []
        for child in node:
            if child.tag == "FILE":
                children.append(FileEntry.from_node(child))
            else:
                children.append(cls.from_node(child))
        return cls(name=node.get("name") or "", children=children)


@dataclass
class Configuration:
    """A CONFIGURATION child of an exporter."""

    node: Node

    @property
    def name(self) -> str:
        return self.node.get("name") or ""

    @property
    def header_path(self) -> str:
        return self.node.get("headerPath") or ""

    @property
    def osx_sdk(self) -> str:
        return self.node.get("osxSDK") or ""

    @property
    def osx_compatibility(self) -> str:
        return self.node.get("osxCompatibility") or ""


@dataclass
class Exporter:
    """A child of EXPORTFORMATS, e.g. XCODE_MAC or VS2015."""

    node: Node

    @property
    def tag(self) -> str:
        return self.node.tag

    @property
    def target_folder(self) -> str:
        return self.node.get("targetFolder") or ""

    @property
    def vst3_folder(self) -> str:
        return self.node.get("vst3Folder") or ""

    def module_paths(self) -> dict[str, str]:
        """Map module id -> relative path from MODULEPATHS (first entry wins)."""
        paths: dict[str, str] = {}
        module_paths = self.node.child("MODULEPATHS")
        if module_paths is None:
            return paths
        for module_path in module_paths:
            module_id = module_path.get("id")
            if module_id is not None and module_id not in paths:
                paths[module_id] = module_path.get("path") or ""
        return paths

    def configurations(self) -> list[Configuration]:
        configurations = self.node.child("CONFIGURATIONS")
        if configurations is None:
            return []
        return [Configuration(node) for node in configurations]


class JucerProject:
    """Typed access to a JUCERPROJECT document."""

    def __init__(self, node: Node, path: Path):
        """
        Initialize from an already parsed root node.

        Args:
            node: Root node of the document.
            path: Path of the .jucer file; relative paths are resolved from
                  its directory.

        Raises:
            ParseError: If the root node is not a JUCERPROJECT.
        """
        self.path = Path(path).absolute()
        if node.tag != PROJECT_TAG:
            raise ParseError(f"{path} is not a valid Jucer project.")
        self.node = node

    @classmethod
    def load(cls, path: str | Path) -> "JucerProject":
        """
        Load and parse a .jucer file.

        Raises:
            ParseError: If the file cannot be read, is not well-formed XML,
                        or is not a Jucer project.
        """
        node = load_document(Path(path))
        if node is None:
            raise ParseError(f"{path} is not a valid Jucer project.")
        return cls(node, Path(path))

    @property
    def directory(self) -> Path:
        return self.path.parent

    @property
    def file_name(self) -> str:
        return self.path.name

    @property
    def name(self) -> str:
        return self.node.get("name") or ""

    @property
    def version(self) -> str:
        return self.node.get("version") or ""

    @property
    def project_type(self) -> str:
        return self.node.get("projectType") or ""

    @property
    def project_type_description(self) -> str:
        return PROJECT_TYPE_DESCRIPTIONS.get(self.project_type, "")

    def main_group(self) -> Optional[Group]:
        node = self.node.child("MAINGROUP")
        if node is None:
            return None
        return Group.from_node(node)

    def module_ids(self) -> list[str]:
        """Module ids in declaration order."""
        modules = self.node.child("MODULES")
        if modules is None:
            return []
        return [module.get("id") or "" for module in modules]

    def has_module(self, module_id: str) -> bool:
        modules = self.node.child("MODULES")
        return modules is not None and modules.child_with("id", module_id) is not None

    def options(self) -> dict[str, str]:
        """Project-wide module option overrides from JUCEOPTIONS."""
        options = self.node.child("JUCEOPTIONS")
        if options is None:
            return {}
        return options.attributes()

    def exporters(self) -> list[Exporter]:
        """All exporters in document order, supported or not."""
        export_formats = self.node.child("EXPORTFORMATS")
        if export_formats is None:
            return []
        return [Exporter(node) for node in export_formats]

    def exporter(self, tag: str) -> Optional[Exporter]:
        export_formats = self.node.child("EXPORTFORMATS")
        if export_formats is None:
            return None
        node = export_formats.child(tag)
        if node is None:
            return None
        return Exporter(node)

    def module_paths(self) -> dict[str, str]:
        """Module search paths, taken from the first exporter only."""
        exporters = self.exporters()
        if not exporters:
            return {}
        return exporters[0].module_paths()

    def __repr__(self) -> str:
        return f"JucerProject({self.name!r}, {self.project_type!r})"
