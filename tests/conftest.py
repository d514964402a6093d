# -*- coding: utf-8 -*-
"""
Shared Test Fixtures - Synthetic bitmaps and rasters.

Bitmap bytes are assembled here with ``struct`` rather than with
``bmpkit.IO`` so codec tests compare against an independent encoder.

Dependencies
------------
pytest

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
2026-03-06

Modified
--------
2026-03-09
"""

# Standard library
import struct

# Third-party
import numpy as np
import pytest

# BMPKit internal
from bmpkit.raster import Raster


def _encode_bmp(
    rgb: np.ndarray,
    horizontal_resolution: int = 2835,
    vertical_resolution: int = 2835,
    magic: bytes = b'BM',
    bitmap_offset: int = 54,
    dib_header_size: int = 40,
    color_depth: int = 24,
    compression: int = 0,
) -> bytes:
    """Encode an ``(height, width, 3)`` uint8 RGB array as bitmap bytes."""
    height, width = rgb.shape[:2]
    padding = (4 - (3 * width) % 4) % 4
    body = bytearray()
    for row in rgb[::-1]:
        body += row[:, ::-1].astype(np.uint8).tobytes()
        body += b'\x00' * padding

    file_header = magic + struct.pack(
        '<IHHI', 54 + len(body), 0, 0, bitmap_offset
    )
    dib_header = struct.pack(
        '<IiiHHIIIIII',
        dib_header_size, width, height, 1, color_depth, compression,
        len(body), horizontal_resolution, vertical_resolution, 0, 0,
    )
    return file_header + dib_header + bytes(body)


@pytest.fixture
def bmp_bytes():
    """Factory that encodes a uint8 RGB array, with header overrides."""
    return _encode_bmp


@pytest.fixture
def flag_rgb():
    """20-row x 10-column flag: blue field, red square, white lower half."""
    rgb = np.zeros((20, 10, 3), dtype=np.uint8)
    rgb[:10] = (0, 0, 187)
    rgb[2:7, 2:7] = (255, 0, 0)
    rgb[10:] = (255, 255, 255)
    return rgb


@pytest.fixture
def flag_bmp(tmp_path, flag_rgb):
    """Path to the flag written as a 24-bit bitmap."""
    path = tmp_path / "flag.bmp"
    path.write_bytes(_encode_bmp(flag_rgb, 11811, 11811))
    return path


@pytest.fixture
def random_raster():
    """7x5 raster of seeded random colors (odd width exercises padding)."""
    rng = np.random.default_rng(42)
    return Raster.from_array(rng.random((7, 5, 3)), 3780, 2835)


@pytest.fixture
def flat_raster():
    """6x6 raster filled with a single mid-gray color."""
    return Raster.from_array(np.full((6, 6, 3), 0.5))
