"""
Custom exceptions for jucer2cmake.
"""


class Jucer2CMakeError(Exception):
    """Base exception for jucer2cmake errors."""

    pass


class ParseError(Jucer2CMakeError):
    """Error reading or parsing a Jucer project file."""

    pass


class ModuleError(Jucer2CMakeError):
    """Error resolving a module path or reading a module header."""

    pass


class ValidationError(Jucer2CMakeError):
    """Error validating configuration or inputs."""

    pass


class WriteError(Jucer2CMakeError):
    """Error writing the generated CMakeLists.txt."""

    pass
