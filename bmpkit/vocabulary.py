# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for BMPKit.

Defines the controlled vocabulary used to tag filters so the registry and
the command-line help can group them consistently.

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
2026-03-02
"""

from enum import Enum


class FilterCategory(Enum):
    """Functional grouping of filters for tagging and help output."""

    GEOMETRY = "geometry"
    COLOR = "color"
    ENHANCE = "enhance"
    EDGES = "edges"
    SMOOTHING = "smoothing"
