# -*- coding: utf-8 -*-
"""
BMPKit Exception Hierarchy - Domain-specific exceptions for BMPKit operations.

Provides a small exception hierarchy that lets the command-line driver and
other callers catch BMPKit errors distinctly from Python built-in
exceptions. All BMPKit exceptions subclass both ``BmpkitError`` and the
appropriate built-in exception, so ``except FileNotFoundError`` and
``except ValueError`` keep working for callers that do not know about
this module.

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-03-02

Modified
--------
2026-03-09
"""

# Standard library
from typing import Optional


class BmpkitError(Exception):
    """Base exception for all BMPKit errors."""


class ValidationError(BmpkitError, ValueError):
    """Invalid input data or configuration passed by calling code.

    Raised for malformed kernels, negative dimensions, and other
    programming-level input failures.
    """


class NotFoundError(BmpkitError, FileNotFoundError):
    """Source image path cannot be opened for reading."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class CreationError(BmpkitError, OSError):
    """Destination image path cannot be opened for writing."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File couldn't be created: {path}")
        self.path = path


class UnsupportedFormatError(BmpkitError, ValueError):
    """File is not the supported 54-byte header, 24-bit bitmap variant.

    Raised for a wrong magic number, wrong header size, unsupported color
    depth, compression, truncated data, or a non-bitmap file extension.
    ``detail`` names what was rejected.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(f"{detail} file format support is not implemented")
        self.detail = detail


class InvalidArgumentsError(BmpkitError, ValueError):
    """Unrecognized filter name or malformed argument tokenization."""

    def __init__(self, detail: Optional[str] = None) -> None:
        message = "Invalid program arguments"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.detail = detail


class InvalidFilterParametersError(ValidationError):
    """Wrong parameter count, unparsable number, or out-of-range value.

    Parse failures and range failures share this one kind; ``reason``
    holds the distinguishing detail.

    Parameters
    ----------
    filter_name : str
        Human-readable filter name (e.g. ``'crop'``, ``'edge detection'``).
    reason : str, optional
        What was wrong with the parameters.
    """

    def __init__(self, filter_name: str, reason: Optional[str] = None) -> None:
        message = f"Invalid parameters for {filter_name} filter"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.filter_name = filter_name
        self.reason = reason
