# -*- coding: utf-8 -*-
"""
BMP Codec - Read and write uncompressed 24-bit bitmaps.

Supports exactly one bitmap variant: a 14-byte file header followed by a
40-byte ``BITMAPINFOHEADER`` (pixel array at byte 54), 24 bits per pixel,
no compression, no palette. Pixel rows are stored bottom-up in B, G, R
byte order and padded to a 4-byte boundary. Every other variant is
rejected with ``UnsupportedFormatError``.

All multi-byte header fields are little-endian and go through the shared
``read_bytes`` / ``write_bytes`` accessors. Field offsets below are
absolute positions from the start of the file.

Dependencies
------------
numpy

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
import logging
from pathlib import Path
from typing import Dict, Tuple, Union

# Third-party
import numpy as np

# BMPKit internal
from bmpkit.exceptions import (
    CreationError,
    NotFoundError,
    UnsupportedFormatError,
)
from bmpkit.IO.base import ImageReader, ImageWriter
from bmpkit.raster import Raster

logger = logging.getLogger(__name__)


MAGIC = b'BM'
FILE_HEADER_SIZE = 14
DIB_HEADER_SIZE = 40
HEADER_SIZE = FILE_HEADER_SIZE + DIB_HEADER_SIZE
BITS_PER_PIXEL = 24
BYTES_PER_PIXEL = BITS_PER_PIXEL // 8

#: Header fields as ``name -> (absolute offset, length, signed)``.
FIELDS: Dict[str, Tuple[int, int, bool]] = {
    'file_size': (2, 4, False),
    'reserved': (6, 4, False),
    'bitmap_offset': (10, 4, False),
    'dib_header_size': (14, 4, False),
    'width': (18, 4, True),
    'height': (22, 4, True),
    'color_planes': (26, 2, False),
    'color_depth': (28, 2, False),
    'compression': (30, 4, False),
    'bitmap_size': (34, 4, False),
    'horizontal_resolution': (38, 4, False),
    'vertical_resolution': (42, 4, False),
    'palette_size': (46, 4, False),
    'important_colors': (50, 4, False),
}


def read_bytes(
    buffer: bytes, start: int, length: int, signed: bool = False
) -> int:
    """Read a little-endian integer of ``length`` bytes at ``start``.

    Parameters
    ----------
    buffer : bytes
        Source buffer.
    start : int
        Offset of the least-significant byte.
    length : int
        Number of bytes to combine.
    signed : bool
        Interpret the value as two's complement. Default ``False``.

    Returns
    -------
    int

    Examples
    --------
    >>> read_bytes(bytes([0x28, 0x00, 0x13, 0x0b, 0x10]), 2, 3)
    1051411
    """
    return int.from_bytes(
        bytes(buffer[start:start + length]), 'little', signed=signed
    )


def write_bytes(
    buffer: bytearray, value: int, start: int, length: int
) -> None:
    """Write the ``length`` low-order bytes of ``value`` at ``start``.

    Bytes are written least-significant first. Higher-order bits that do
    not fit in ``length`` bytes are dropped.
    """
    mask = (1 << (8 * length)) - 1
    buffer[start:start + length] = (int(value) & mask).to_bytes(
        length, 'little'
    )


def row_padding(width: int) -> int:
    """Number of zero bytes that pad a pixel row to a 4-byte boundary."""
    return (4 - (BYTES_PER_PIXEL * width) % 4) % 4


def bitmap_size(height: int, width: int) -> int:
    """Size in bytes of the padded pixel array."""
    return BYTES_PER_PIXEL * height * width + height * row_padding(width)


class BmpReader(ImageReader):
    """Decode a 24-bit, 54-byte header bitmap into a ``Raster``.

    The header is read and validated when the reader is constructed;
    pixels are decoded by ``read_full``. The file is opened only for the
    duration of each of those calls.

    Parameters
    ----------
    filepath : str or Path
        Path to the ``.bmp`` file.

    Raises
    ------
    NotFoundError
        If the file cannot be opened for reading.
    UnsupportedFormatError
        If the magic number, header size, color depth or compression is
        not the supported variant, or the header is truncated.

    Examples
    --------
    >>> with BmpReader('flag.bmp') as reader:
    ...     raster = reader.read_full()
    >>> raster.shape
    (20, 10)
    """

    def _open(self):
        try:
            return open(self.filepath, 'rb')
        except OSError as exc:
            raise NotFoundError(str(self.filepath)) from exc

    def _load_metadata(self) -> None:
        with self._open() as f:
            header = f.read(HEADER_SIZE)

        if header[:2] != MAGIC:
            raise UnsupportedFormatError(str(self.filepath))
        if len(header) < FILE_HEADER_SIZE:
            raise UnsupportedFormatError("truncated file header")
        if read_bytes(header, *FIELDS['bitmap_offset'][:2]) != HEADER_SIZE:
            raise UnsupportedFormatError("not 54-byte header")
        if len(header) < HEADER_SIZE:
            raise UnsupportedFormatError("truncated DIB header")

        self.metadata = {
            name: read_bytes(header, offset, length, signed=signed)
            for name, (offset, length, signed) in FIELDS.items()
        }
        meta = self.metadata
        logger.debug("BMP header for %s: %s", self.filepath, meta)

        if meta['color_depth'] != BITS_PER_PIXEL:
            raise UnsupportedFormatError(f"{meta['color_depth']} bits color")
        if meta['dib_header_size'] != DIB_HEADER_SIZE:
            raise UnsupportedFormatError("not 54-byte header")
        if meta['compression'] != 0:
            raise UnsupportedFormatError(
                f"compression type {meta['compression']}"
            )
        if meta['width'] < 0 or meta['height'] < 0:
            raise UnsupportedFormatError(
                f"{meta['width']}x{meta['height']} dimensions"
            )

    def read_full(self) -> Raster:
        """Decode every pixel row.

        File rows are stored bottom-up; file row 0 becomes raster row
        ``height - 1``.

        Returns
        -------
        Raster
            Decoded raster carrying the header resolutions.

        Raises
        ------
        UnsupportedFormatError
            If the file ends before the declared pixel array does.
        """
        height, width = self.get_shape()
        stride = BYTES_PER_PIXEL * width + row_padding(width)
        expected = stride * height

        with self._open() as f:
            f.seek(HEADER_SIZE)
            data = f.read(expected)

        if len(data) < expected:
            raise UnsupportedFormatError("truncated pixel data")

        rows = np.frombuffer(data, dtype=np.uint8).reshape(height, stride)
        bgr = rows[:, :BYTES_PER_PIXEL * width].reshape(height, width, 3)
        rgb = bgr[::-1, :, ::-1].astype(np.float64) / 255.0

        logger.debug(
            "Decoded %s: %d x %d pixels", self.filepath, height, width
        )
        return Raster.from_array(
            rgb,
            self.metadata['horizontal_resolution'],
            self.metadata['vertical_resolution'],
        )


class BmpWriter(ImageWriter):
    """Encode a ``Raster`` as a 24-bit, 54-byte header bitmap.

    Channels are converted to 8 bits by scaling and truncating. Rows are
    written bottom-up in B, G, R order with zero padding bytes.

    Parameters
    ----------
    filepath : str or Path
        Output file path.

    Examples
    --------
    >>> with BmpWriter('out.bmp') as writer:
    ...     writer.write(raster)
    """

    def build_header(self, raster: Raster) -> bytearray:
        """Build the 54-byte file and DIB header for ``raster``."""
        height, width = raster.shape
        horizontal_resolution, vertical_resolution = raster.resolution
        size = bitmap_size(height, width)

        values = {
            'file_size': HEADER_SIZE + size,
            'reserved': 0,
            'bitmap_offset': HEADER_SIZE,
            'dib_header_size': DIB_HEADER_SIZE,
            'width': width,
            'height': height,
            'color_planes': 1,
            'color_depth': BITS_PER_PIXEL,
            'compression': 0,
            'bitmap_size': size,
            'horizontal_resolution': horizontal_resolution,
            'vertical_resolution': vertical_resolution,
            'palette_size': 0,
            'important_colors': 0,
        }

        header = bytearray(HEADER_SIZE)
        header[:2] = MAGIC
        for name, (offset, length, _) in FIELDS.items():
            write_bytes(header, values[name], offset, length)
        return header

    def encode_pixels(self, raster: Raster) -> bytes:
        """Encode the pixel array, bottom-up, BGR, row-padded."""
        height, width = raster.shape
        stride = BYTES_PER_PIXEL * width + row_padding(width)

        rgb = (raster.pixels * 255.0).astype(np.uint8)
        bgr = rgb[::-1, :, ::-1]

        rows = np.zeros((height, stride), dtype=np.uint8)
        rows[:, :BYTES_PER_PIXEL * width] = bgr.reshape(
            height, BYTES_PER_PIXEL * width
        )
        return rows.tobytes()

    def write(self, raster: Raster) -> None:
        """Write ``raster`` to ``self.filepath``.

        Raises
        ------
        CreationError
            If the destination cannot be opened for writing.
        """
        header = self.build_header(raster)
        body = self.encode_pixels(raster)

        try:
            f = open(self.filepath, 'wb')
        except OSError as exc:
            raise CreationError(str(self.filepath)) from exc
        with f:
            f.write(header)
            f.write(body)

        logger.debug(
            "Encoded %s: %d x %d pixels, %d bytes",
            self.filepath, raster.height, raster.width,
            len(header) + len(body),
        )


def read_bmp(path: Union[str, Path]) -> Raster:
    """Decode the bitmap at ``path``.

    Raises
    ------
    NotFoundError
        If the path cannot be opened for reading.
    UnsupportedFormatError
        If the file is not the supported bitmap variant.
    """
    with BmpReader(path) as reader:
        return reader.read_full()


def write_bmp(path: Union[str, Path], raster: Raster) -> None:
    """Encode ``raster`` to ``path``.

    Raises
    ------
    CreationError
        If the path cannot be opened for writing.
    """
    with BmpWriter(path) as writer:
        writer.write(raster)
