# -*- coding: utf-8 -*-
"""
IO Base Classes - Abstract interfaces for raster readers and writers.

Defines abstract base classes for decoding files into ``Raster`` objects
and encoding them back. Concrete format implementations inherit from
these classes and supply the byte-level logic.

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
2026-03-04
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from bmpkit.raster import Raster


class ImageReader(ABC):
    """
    Abstract base class for all raster readers.

    Header metadata is parsed and validated at construction so that a
    reader which exists describes a decodable file. Pixel data is only
    decoded when ``read_full`` is called.

    Attributes
    ----------
    filepath : Path
        Path to the image file
    metadata : Dict[str, Any]
        Header fields extracted from the file
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        """
        Initialize the image reader.

        Parameters
        ----------
        filepath : Union[str, Path]
            Path to the image file
        """
        self.filepath = Path(filepath)
        self.metadata: Dict[str, Any] = {}
        self._load_metadata()

    @abstractmethod
    def _load_metadata(self) -> None:
        """
        Load and validate header metadata from the image file.

        Populates ``self.metadata`` with format-specific fields including
        the image dimensions.
        """
        pass

    @abstractmethod
    def read_full(self) -> Raster:
        """
        Decode the entire image.

        Returns
        -------
        Raster
            Decoded raster, row 0 at the visual top
        """
        pass

    def get_shape(self) -> Tuple[int, int]:
        """
        Get the shape of the image.

        Returns
        -------
        Tuple[int, int]
            ``(height, width)`` from the header
        """
        return (self.metadata['height'], self.metadata['width'])

    def close(self) -> None:
        """
        Close the reader and release resources.

        Default implementation does nothing. Override if the reader
        maintains open file handles or other resources.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False


class ImageWriter(ABC):
    """
    Abstract base class for all raster writers.

    Attributes
    ----------
    filepath : Path
        Path where the image will be written
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        """
        Initialize the image writer.

        Parameters
        ----------
        filepath : Union[str, Path]
            Path where the image will be written
        """
        self.filepath = Path(filepath)

    @abstractmethod
    def write(self, raster: Raster) -> None:
        """
        Encode a raster to the destination file.

        Parameters
        ----------
        raster : Raster
            Raster to encode

        Raises
        ------
        CreationError
            If the destination cannot be opened for writing
        """
        pass

    def close(self) -> None:
        """
        Close the writer and release resources.

        Default implementation does nothing. Override if the writer
        maintains open file handles or other resources.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
