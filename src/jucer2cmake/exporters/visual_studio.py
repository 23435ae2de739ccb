"""
Visual Studio export targets.
"""

from jucer2cmake.exporters.base import ExportTarget


class VisualStudio2015Target(ExportTarget):
    name = "VS2015"
    display_name = "Visual Studio 2015"
    default_vst3_folder = "c:\\SDKs\\VST_SDK\\VST3_SDK"


class VisualStudio2013Target(ExportTarget):
    name = "VS2013"
    display_name = "Visual Studio 2013"
    default_vst3_folder = "c:\\SDKs\\VST_SDK\\VST3_SDK"
