"""
Core modules for jucer2cmake.
"""

from jucer2cmake.core.config import ConversionConfig, ConversionResult, convert
from jucer2cmake.core.project import JucerProject
from jucer2cmake.core.writer import ReprojucerWriter
from jucer2cmake.core.juce6 import Juce6Writer

__all__ = [
    "ConversionConfig",
    "ConversionResult",
    "convert",
    "JucerProject",
    "ReprojucerWriter",
    "Juce6Writer",
]
