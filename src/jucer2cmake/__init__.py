"""
jucer2cmake - Generate CMakeLists.txt files from Projucer (.jucer) projects.

This package provides tools to:
- Read a .jucer project (metadata, file groups, modules, exporters)
- Write an equivalent CMakeLists.txt based on the Reprojucer CMake functions
- Write a minimal CMakeLists.txt for JUCE 6's own CMake API
"""

from jucer2cmake.core.config import ConversionConfig, convert
from jucer2cmake.core.project import JucerProject
from jucer2cmake.core.writer import ReprojucerWriter
from jucer2cmake.core.juce6 import Juce6Writer
from jucer2cmake.errors import Jucer2CMakeError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConversionConfig",
    "convert",
    "JucerProject",
    "ReprojucerWriter",
    "Juce6Writer",
    "Jucer2CMakeError",
]
