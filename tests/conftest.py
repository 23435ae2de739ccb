"""Pytest configuration and fixtures for jucer2cmake tests."""

import shutil
from pathlib import Path

import pytest

from jucer2cmake.core.document import parse_document
from jucer2cmake.core.project import JucerProject


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_copy(fixtures_dir: Path, tmp_path: Path) -> Path:
    """Copy of the fixtures tree, so relative paths are stable per test.

    Layout:
        cmake/Reprojucer.cmake
        modules/<module>/<module>.h
        GuiApp/Foo.jucer
        AudioPlugin/AudioPlugin.jucer
        build/                       (empty, output directory)
    """
    root = tmp_path / "fixtures"
    shutil.copytree(fixtures_dir, root)
    (root / "build").mkdir()
    return root


@pytest.fixture
def gui_app_jucer(fixtures_copy: Path) -> Path:
    """Path to the Foo GUI application project."""
    return fixtures_copy / "GuiApp" / "Foo.jucer"


@pytest.fixture
def audio_plugin_jucer(fixtures_copy: Path) -> Path:
    """Path to the Gain Plugin audio plug-in project."""
    return fixtures_copy / "AudioPlugin" / "AudioPlugin.jucer"


@pytest.fixture
def reprojucer_file(fixtures_copy: Path) -> Path:
    """Path to the placeholder Reprojucer.cmake."""
    return fixtures_copy / "cmake" / "Reprojucer.cmake"


@pytest.fixture
def output_dir(fixtures_copy: Path) -> Path:
    """Directory receiving generated CMakeLists.txt files."""
    return fixtures_copy / "build"


@pytest.fixture
def make_project(tmp_path: Path):
    """Factory building a JucerProject from an XML string.

    The .jucer file is written to tmp_path so module headers can be placed
    next to it.
    """

    def _make(xml: str, file_name: str = "Test.jucer") -> JucerProject:
        path = tmp_path / file_name
        path.write_text(xml, encoding="utf-8")
        node = parse_document(xml.encode("utf-8"))
        assert node is not None
        return JucerProject(node, path)

    return _make
