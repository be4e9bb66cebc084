"""Error codes, their descriptions and the exception raised for them."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Identifies what went wrong."""

    SUCCESS = 0
    INVEXT = 1
    INVFILE = 2
    INVPNG = 3
    INVXPM = 4
    INVPOS = 5
    INVDIM = 6
    INVIMG = 7
    VERTFAIL = 8
    FRAGFAIL = 9
    SHDRFAIL = 10
    MEMFAIL = 11
    GLADFAIL = 12
    GLFWFAIL = 13
    WINFAIL = 14
    STRTOOBIG = 15


_MESSAGES = {
    ErrorCode.SUCCESS: "No Errors",
    ErrorCode.INVEXT: "File has invalid extension",
    ErrorCode.INVFILE: "Failed to open the file",
    ErrorCode.INVPNG: "PNG file is invalid or corrupted",
    ErrorCode.INVXPM: "XPM42 file is invalid or corrupted",
    ErrorCode.INVPOS: "The specified X or Y positions are out of bounds",
    ErrorCode.INVDIM: "The specified Width or Height dimensions are out of bounds",
    ErrorCode.INVIMG: "The provided image is invalid, might indicate mismanagement of images",
    ErrorCode.VERTFAIL: "Failed to compile the vertex shader.",
    ErrorCode.FRAGFAIL: "Failed to compile the fragment shader.",
    ErrorCode.SHDRFAIL: "Failed to compile the shaders.",
    ErrorCode.MEMFAIL: "Failed to allocate memory",
    ErrorCode.GLADFAIL: "Failed to initialize GLAD",
    ErrorCode.GLFWFAIL: "Failed to initialize GLFW",
    ErrorCode.WINFAIL: "Failed to create window",
    ErrorCode.STRTOOBIG: "String is too big to be drawn",
}


def strerror(code: ErrorCode | int) -> str:
    """Return the English description of ``code``; ValueError if it is not a known code."""
    return _MESSAGES[ErrorCode(code)]


class MlxError(Exception):
    """Raised when an operation fails; ``code`` tells why."""

    def __init__(self, code: ErrorCode | int) -> None:
        self.code = ErrorCode(code)
        super().__init__(strerror(self.code))