# -*- coding: utf-8 -*-
"""
Raster Data Model - Normalized RGB pixels and the in-memory image grid.

Defines ``Pixel``, a three-channel color with every channel clamped to
``[0.0, 1.0]``, and ``Raster``, a ``(height, width)`` grid of pixels backed
by a ``float64`` numpy array of shape ``(height, width, 3)`` together with
the physical resolution carried through from the bitmap header.

Row 0 of a ``Raster`` is the visual top of the image. Coordinate access
outside the grid is clamped to the nearest edge pixel, which is what lets
neighborhood filters run over the image borders without special cases.

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
import numbers
from typing import Iterator, Sequence, Tuple, Union

# Third-party
import numpy as np

# BMPKit internal
from bmpkit.exceptions import ValidationError

#: Channel tolerance used by ``Pixel.__eq__``. 8-bit quantization in the
#: bitmap format loses up to 1/255 per channel on each round trip.
PIXEL_EPSILON = 1e-2

#: Maximum 8-bit channel value.
MAX_COLOR = 255.0


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, float(value)))


class Pixel:
    """RGB color with channels clamped to ``[0.0, 1.0]`` on every write.

    Equality is approximate: two pixels compare equal when every channel
    differs by less than ``PIXEL_EPSILON``. Pixels are therefore not
    hashable.

    Parameters
    ----------
    r, g, b : float
        Channel values. Out-of-range values are clamped.

    Examples
    --------
    >>> Pixel(1.5, 0.5, -2.0)
    Pixel(r=1.0, g=0.5, b=0.0)
    >>> Pixel.from_rgb(0, 0, 187) == Pixel(0.0, 0.0, 187 / 255)
    True
    """

    __slots__ = ('_r', '_g', '_b')
    __hash__ = None

    def __init__(self, r: float = 0.0, g: float = 0.0, b: float = 0.0) -> None:
        self._r = _clamp(r)
        self._g = _clamp(g)
        self._b = _clamp(b)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Pixel':
        """Build a pixel from three 8-bit channel values."""
        return cls(r / MAX_COLOR, g / MAX_COLOR, b / MAX_COLOR)

    @property
    def r(self) -> float:
        return self._r

    @r.setter
    def r(self, value: float) -> None:
        self._r = _clamp(value)

    @property
    def g(self) -> float:
        return self._g

    @g.setter
    def g(self, value: float) -> None:
        self._g = _clamp(value)

    @property
    def b(self) -> float:
        return self._b

    @b.setter
    def b(self, value: float) -> None:
        self._b = _clamp(value)

    def to_rgb(self) -> Tuple[int, int, int]:
        """Convert to three 8-bit values by scaling and truncating."""
        return (
            int(self._r * MAX_COLOR),
            int(self._g * MAX_COLOR),
            int(self._b * MAX_COLOR),
        )

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self._r, self._g, self._b)

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def __add__(self, other: 'Pixel') -> 'Pixel':
        if not isinstance(other, Pixel):
            return NotImplemented
        return Pixel(self._r + other.r, self._g + other.g, self._b + other.b)

    def __mul__(
        self, other: Union[float, Sequence[float]]
    ) -> 'Pixel':
        if isinstance(other, numbers.Real):
            return Pixel(self._r * other, self._g * other, self._b * other)
        try:
            mr, mg, mb = other
        except (TypeError, ValueError):
            return NotImplemented
        return Pixel(self._r * mr, self._g * mg, self._b * mb)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pixel):
            return NotImplemented
        return (
            abs(self._r - other.r) < PIXEL_EPSILON
            and abs(self._g - other.g) < PIXEL_EPSILON
            and abs(self._b - other.b) < PIXEL_EPSILON
        )

    def __repr__(self) -> str:
        return f"Pixel(r={self._r!r}, g={self._g!r}, b={self._b!r})"


class Raster:
    """Grid of normalized RGB pixels plus physical resolution.

    The grid is stored as a ``float64`` array of shape
    ``(height, width, 3)`` in ``[0.0, 1.0]``. ``height`` and ``width``
    always match the array extents.

    Filters that only touch one pixel at a time modify ``pixels`` in
    place. Neighborhood filters read the current grid, build a complete
    new one, and hand it to ``replace()`` so no pixel is read after it
    has been overwritten.

    Parameters
    ----------
    height : int
        Number of rows.
    width : int
        Number of columns.
    horizontal_resolution : int
        Horizontal resolution in pixels per meter. Default 0.
    vertical_resolution : int
        Vertical resolution in pixels per meter. Default 0.

    Raises
    ------
    ValidationError
        If ``height`` or ``width`` is negative.

    Examples
    --------
    >>> raster = Raster(2, 3, 2835, 2835)
    >>> raster.shape
    (2, 3)
    >>> raster.get(-5, 10) == raster.get(0, 2)
    True
    """

    def __init__(
        self,
        height: int,
        width: int,
        horizontal_resolution: int = 0,
        vertical_resolution: int = 0,
    ) -> None:
        if height < 0 or width < 0:
            raise ValidationError(
                f"Raster dimensions must be non-negative, "
                f"got ({height}, {width})"
            )
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)
        self.horizontal_resolution = horizontal_resolution
        self.vertical_resolution = vertical_resolution

    @classmethod
    def from_array(
        cls,
        pixels: np.ndarray,
        horizontal_resolution: int = 0,
        vertical_resolution: int = 0,
    ) -> 'Raster':
        """Build a raster from a ``(height, width, 3)`` array.

        Values are copied and clamped to ``[0.0, 1.0]``.
        """
        raster = cls(0, 0, horizontal_resolution, vertical_resolution)
        raster.replace(pixels)
        return raster

    @classmethod
    def from_pixels(
        cls,
        rows: Sequence[Sequence[Pixel]],
        horizontal_resolution: int = 0,
        vertical_resolution: int = 0,
    ) -> 'Raster':
        """Build a raster from nested rows of ``Pixel`` objects.

        Raises
        ------
        ValidationError
            If the rows do not all have the same length.
        """
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise ValidationError(
                f"All rows must have the same width, got widths {sorted(widths)}"
            )
        width = widths.pop() if widths else 0
        data = np.array(
            [[p.as_tuple() for p in row] for row in rows],
            dtype=np.float64,
        ).reshape(len(rows), width, 3)
        return cls.from_array(data, horizontal_resolution, vertical_resolution)

    # -----------------------------------------------------------------
    # Extents and metadata
    # -----------------------------------------------------------------
    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        """``(height, width)`` of the grid."""
        return (self.height, self.width)

    @property
    def resolution(self) -> Tuple[int, int]:
        """``(horizontal, vertical)`` resolution in pixels per meter."""
        return (self.horizontal_resolution, self.vertical_resolution)

    def set_resolution(
        self, horizontal_resolution: int, vertical_resolution: int
    ) -> None:
        self.horizontal_resolution = horizontal_resolution
        self.vertical_resolution = vertical_resolution

    @property
    def is_empty(self) -> bool:
        return self.height == 0 or self.width == 0

    # -----------------------------------------------------------------
    # Grid access
    # -----------------------------------------------------------------
    @property
    def pixels(self) -> np.ndarray:
        """The live ``(height, width, 3)`` grid.

        In-place edits must keep values within ``[0.0, 1.0]``; use
        ``replace()`` to install a grid that may need clamping.
        """
        return self._pixels

    def replace(self, pixels: np.ndarray) -> None:
        """Swap in a new grid, clamping every channel to ``[0.0, 1.0]``.

        Parameters
        ----------
        pixels : np.ndarray
            Array of shape ``(height, width, 3)``. The extents of the
            raster follow the new grid.

        Raises
        ------
        ValidationError
            If ``pixels`` is not a 3-channel 3D array.
        """
        pixels = np.asarray(pixels, dtype=np.float64)
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValidationError(
                f"Expected pixel grid of shape (height, width, 3), "
                f"got {pixels.shape}"
            )
        self._pixels = np.clip(pixels, 0.0, 1.0)

    def _clamp_index(self, i: int, j: int) -> Tuple[int, int]:
        if self.is_empty:
            raise IndexError("Cannot access pixels of an empty raster")
        return (
            min(self.height - 1, max(0, i)),
            min(self.width - 1, max(0, j)),
        )

    def get(self, i: int, j: int) -> Pixel:
        """Return the pixel at row ``i``, column ``j``.

        Indices outside the grid are clamped to the nearest edge.
        """
        i, j = self._clamp_index(i, j)
        r, g, b = self._pixels[i, j]
        return Pixel(r, g, b)

    def set(self, i: int, j: int, pixel: Pixel) -> None:
        """Write ``pixel`` at row ``i``, column ``j`` (edge-clamped)."""
        i, j = self._clamp_index(i, j)
        self._pixels[i, j] = pixel.as_tuple()

    def reshape(self, new_height: int, new_width: int) -> None:
        """Resize the grid to ``(new_height, new_width)``.

        Extra rows and columns are truncated. Growing pads with black
        pixels.

        Raises
        ------
        ValidationError
            If either dimension is negative.
        """
        if new_height < 0 or new_width < 0:
            raise ValidationError(
                f"Raster dimensions must be non-negative, "
                f"got ({new_height}, {new_width})"
            )
        resized = np.zeros((new_height, new_width, 3), dtype=np.float64)
        keep_h = min(self.height, new_height)
        keep_w = min(self.width, new_width)
        resized[:keep_h, :keep_w] = self._pixels[:keep_h, :keep_w]
        self._pixels = resized

    def copy(self) -> 'Raster':
        return Raster.from_array(
            self._pixels, self.horizontal_resolution, self.vertical_resolution
        )

    def __repr__(self) -> str:
        return (
            f"Raster(height={self.height}, width={self.width}, "
            f"resolution={self.resolution})"
        )
