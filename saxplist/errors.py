# encoding: utf-8
"""Exceptions raised by saxplist."""


class PlistError(Exception):
    """Base exception."""


class PlistNotFoundError(PlistError, FileNotFoundError):
    """The plist path passed in does not exist."""


class PlistStructureError(PlistError):
    """
    The element structure is not a plist. Raised from inside the sax
    callbacks, so it aborts the whole parse.
    """


class UnrecognizedTopLevelTypeError(PlistStructureError):
    """The first element inside the root element is not a plist type."""


class InvalidElementError(PlistStructureError):
    """An element name that plist xml does not allow at that position."""


class InvalidValueError(PlistError, ValueError):
    """Text that can't be converted to the type of its element."""
