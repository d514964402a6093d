# -*- coding: utf-8 -*-
"""
Filter Registry - Maps command-line aliases to filter instances.

The filter set is closed, so the registry is an explicit object built once
at startup (``FilterRegistry.default()``) and passed to whatever needs to
resolve aliases. Filters are stateless, so one instance per alias is
shared by every application.

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
2026-03-05

Modified
--------
2026-03-06
"""

# Standard library
import logging
from typing import Dict, Iterator, List, Optional, Type

# BMPKit internal
from bmpkit.exceptions import InvalidArgumentsError, ValidationError
from bmpkit.image_processing.base import ImageFilter
from bmpkit.image_processing.filters import (
    CropFilter,
    EdgeDetectionFilter,
    GaussianBlurFilter,
    GrayscaleFilter,
    NegativeFilter,
    SharpeningFilter,
)

logger = logging.getLogger(__name__)

#: Built-in filters in help-listing order.
DEFAULT_FILTERS: List[Type[ImageFilter]] = [
    CropFilter,
    GrayscaleFilter,
    NegativeFilter,
    SharpeningFilter,
    EdgeDetectionFilter,
    GaussianBlurFilter,
]


class FilterRegistry:
    """Alias-keyed collection of filter instances.

    Parameters
    ----------
    filters : Iterable[Type[ImageFilter]], optional
        Filter classes to register. Default registers nothing.

    Examples
    --------
    >>> registry = FilterRegistry.default()
    >>> registry.resolve('-gs')
    GrayscaleFilter(alias='-gs')
    """

    def __init__(self, filters: Optional[List[Type[ImageFilter]]] = None) -> None:
        self._filters: Dict[str, ImageFilter] = {}
        for filter_cls in filters or ():
            self.register(filter_cls)

    @classmethod
    def default(cls) -> 'FilterRegistry':
        """Registry with every built-in filter."""
        return cls(DEFAULT_FILTERS)

    def register(self, filter_cls: Type[ImageFilter]) -> None:
        """Instantiate ``filter_cls`` and register it under its alias.

        Raises
        ------
        ValidationError
            If the class has no alias or the alias is already taken.
        """
        alias = filter_cls.alias
        if not alias:
            raise ValidationError(
                f"{filter_cls.__qualname__} does not declare an alias"
            )
        if alias in self._filters:
            raise ValidationError(f"Filter alias {alias!r} already registered")
        self._filters[alias] = filter_cls()
        logger.debug("Registered %s as %s", filter_cls.__qualname__, alias)

    def resolve(self, alias: str) -> ImageFilter:
        """Return the filter registered under ``alias``.

        Raises
        ------
        InvalidArgumentsError
            If no filter uses ``alias``.
        """
        try:
            return self._filters[alias]
        except KeyError:
            raise InvalidArgumentsError(f"unknown filter {alias!r}") from None

    def __contains__(self, alias: object) -> bool:
        return alias in self._filters

    def __iter__(self) -> Iterator[ImageFilter]:
        return iter(self._filters.values())

    def __len__(self) -> int:
        return len(self._filters)

    def describe(self) -> List[str]:
        """One help line per filter: usage followed by its description."""
        lines = []
        for f in self:
            tags = getattr(f, '__processor_tags__', {})
            description = tags.get('description') or ''
            lines.append(f"{f.usage():<24} {description}".rstrip())
        return lines
