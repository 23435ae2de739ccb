"""Tests for jucer2cmake.core.project module."""

from pathlib import Path

import pytest

from jucer2cmake.core.document import parse_document
from jucer2cmake.core.project import FileEntry, Group, JucerProject
from jucer2cmake.errors import ParseError


class TestJucerProjectLoad:
    """Tests for loading Jucer projects."""

    def test_load_gui_app(self, gui_app_jucer: Path):
        project = JucerProject.load(gui_app_jucer)
        assert project.name == "Foo"
        assert project.version == "1.0.0"
        assert project.project_type == "guiapp"
        assert project.project_type_description == "GUI Application"
        assert project.file_name == "Foo.jucer"
        assert project.directory == gui_app_jucer.parent.absolute()

    def test_load_malformed_raises(self, tmp_path: Path):
        path = tmp_path / "Broken.jucer"
        path.write_text("<JUCERPROJECT name='x'>", encoding="utf-8")
        with pytest.raises(ParseError, match="is not a valid Jucer project"):
            JucerProject.load(path)

    def test_load_wrong_root_raises(self, tmp_path: Path):
        path = tmp_path / "Other.jucer"
        path.write_text("<PROJECT name='x'/>", encoding="utf-8")
        with pytest.raises(ParseError, match="is not a valid Jucer project"):
            JucerProject.load(path)

    def test_load_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ParseError):
            JucerProject.load(tmp_path / "Missing.jucer")


class TestProjectTypes:
    """Tests for projectType descriptions."""

    @pytest.mark.parametrize(
        "project_type,description",
        [
            ("guiapp", "GUI Application"),
            ("consoleapp", "Console Application"),
            ("library", "Static Library"),
            ("audioplug", "Audio Plug-in"),
            ("dll", ""),
        ],
    )
    def test_description(self, make_project, project_type, description):
        project = make_project(f'<JUCERPROJECT projectType="{project_type}"/>')
        assert project.project_type_description == description

    def test_missing_project_type(self, make_project):
        project = make_project("<JUCERPROJECT/>")
        assert project.project_type == ""
        assert project.project_type_description == ""


class TestProjectModel:
    """Tests for typed access to the project tree."""

    def test_main_group_tree(self, gui_app_jucer: Path):
        main_group = JucerProject.load(gui_app_jucer).main_group()
        assert isinstance(main_group, Group)
        assert main_group.name == "Foo"
        source = main_group.children[0]
        assert isinstance(source, Group)
        assert source.name == "Source"
        assert [f.path for f in source.children] == [
            "Source/Main.cpp",
            "Source/Main.h",
        ]

    def test_main_group_missing(self, make_project):
        assert make_project("<JUCERPROJECT/>").main_group() is None

    def test_module_ids_in_order(self, audio_plugin_jucer: Path):
        project = JucerProject.load(audio_plugin_jucer)
        assert project.module_ids() == ["juce_core", "juce_audio_processors"]
        assert project.has_module("juce_audio_processors")
        assert not project.has_module("juce_gui_basics")

    def test_module_paths_from_first_exporter(self, audio_plugin_jucer: Path):
        project = JucerProject.load(audio_plugin_jucer)
        assert project.module_paths() == {
            "juce_core": "../modules",
            "juce_audio_processors": "../modules",
        }

    def test_module_paths_without_exporters(self, make_project):
        assert make_project("<JUCERPROJECT/>").module_paths() == {}

    def test_options(self, audio_plugin_jucer: Path):
        options = JucerProject.load(audio_plugin_jucer).options()
        assert options["JUCE_PLUGINHOST_VST3"] == "enabled"
        assert options["JUCE_PLUGINHOST_AU"] == "disabled"

    def test_options_missing(self, make_project):
        assert make_project("<JUCERPROJECT/>").options() == {}

    def test_exporters_in_document_order(self, audio_plugin_jucer: Path):
        project = JucerProject.load(audio_plugin_jucer)
        assert [e.tag for e in project.exporters()] == [
            "LINUX_MAKE",
            "VS2013",
            "XCODE_MAC",
            "VS2015",
        ]

    def test_exporter_lookup(self, audio_plugin_jucer: Path):
        project = JucerProject.load(audio_plugin_jucer)
        xcode = project.exporter("XCODE_MAC")
        assert xcode is not None
        assert xcode.target_folder == "Builds/MacOSX"
        assert xcode.vst3_folder == "/opt/VST3 SDK"
        assert [c.name for c in xcode.configurations()] == ["Debug", "Release"]
        assert project.exporter("CODEBLOCKS_WINDOWS") is None

    def test_configuration_properties(self, gui_app_jucer: Path):
        xcode = JucerProject.load(gui_app_jucer).exporter("XCODE_MAC")
        debug = xcode.configurations()[0]
        assert debug.osx_sdk == "10.9 SDK"
        assert debug.osx_compatibility == "10.9 SDK"
        assert debug.header_path == "../../Lib/include\n\n../../Other"


class TestFileEntry:
    """Tests for FileEntry classification."""

    def _entry(self, xml: str) -> FileEntry:
        return FileEntry.from_node(parse_document(xml.encode("utf-8")))

    def test_resource(self):
        entry = self._entry('<FILE file="logo.png" resource="1" compile="0"/>')
        assert entry.resource
        assert not entry.do_not_compile

    def test_compiled_cpp(self):
        entry = self._entry('<FILE file="Main.cpp" resource="0" compile="1"/>')
        assert not entry.resource
        assert entry.compile == 1
        assert not entry.do_not_compile

    def test_cpp_not_compiled(self):
        entry = self._entry('<FILE file="Inline.cpp" resource="0" compile="0"/>')
        assert entry.do_not_compile

    def test_extension_case_insensitive(self):
        entry = self._entry('<FILE file="Inline.CPP" compile="0"/>')
        assert entry.do_not_compile

    def test_header_not_compiled_is_not_tracked(self):
        entry = self._entry('<FILE file="Main.h" resource="0" compile="0"/>')
        assert not entry.do_not_compile

    def test_missing_compile_attribute(self):
        entry = self._entry('<FILE file="Main.cpp" resource="0"/>')
        assert entry.compile is None
        assert not entry.do_not_compile
