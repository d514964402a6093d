# -*- coding: utf-8 -*-
"""
IO Module - Input/Output operations for bitmap rasters.

Exposes the 24-bit BMP reader and writer plus the ``read`` / ``write``
convenience functions used by the command-line driver. The convenience
functions check the ``.bmp`` file extension before touching the file;
``read_bmp`` / ``write_bmp`` skip that check.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

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
from pathlib import Path
from typing import Union

# BMPKit internal
from bmpkit.exceptions import UnsupportedFormatError
from bmpkit.IO.base import ImageReader, ImageWriter
from bmpkit.IO.bmp import (
    BmpReader,
    BmpWriter,
    read_bmp,
    read_bytes,
    write_bmp,
    write_bytes,
)
from bmpkit.raster import Raster

#: File extensions accepted by ``open_image`` / ``read`` / ``write``.
SUPPORTED_EXTENSIONS = ('.bmp',)


def check_extension(path: Union[str, Path]) -> None:
    """Raise ``UnsupportedFormatError`` unless ``path`` ends in ``.bmp``."""
    path = Path(path)
    if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError("not .bmp")


def open_image(filepath: Union[str, Path]) -> ImageReader:
    """Open a bitmap file for reading.

    Parameters
    ----------
    filepath : str or Path
        Path to a ``.bmp`` file.

    Returns
    -------
    ImageReader
        Reader with the header already validated.

    Raises
    ------
    UnsupportedFormatError
        If the extension is not ``.bmp`` or the file is not the
        supported bitmap variant.
    NotFoundError
        If the file cannot be opened.

    Examples
    --------
    >>> from bmpkit.IO import open_image
    >>> with open_image('lenna.bmp') as reader:
    ...     raster = reader.read_full()
    """
    filepath = Path(filepath)
    check_extension(filepath)
    return BmpReader(filepath)


def read(filepath: Union[str, Path]) -> Raster:
    """Decode a ``.bmp`` file into a ``Raster``."""
    with open_image(filepath) as reader:
        return reader.read_full()


def write(raster: Raster, filepath: Union[str, Path]) -> None:
    """Encode ``raster`` to a ``.bmp`` file.

    Raises
    ------
    UnsupportedFormatError
        If the extension is not ``.bmp``.
    CreationError
        If the file cannot be created.
    """
    filepath = Path(filepath)
    check_extension(filepath)
    with BmpWriter(filepath) as writer:
        writer.write(raster)


__all__ = [
    'ImageReader',
    'ImageWriter',
    'BmpReader',
    'BmpWriter',
    'read_bmp',
    'write_bmp',
    'read_bytes',
    'write_bytes',
    'check_extension',
    'open_image',
    'read',
    'write',
    'SUPPORTED_EXTENSIONS',
]
