# -*- coding: utf-8 -*-
"""
Filter Versioning - Version and capability-tag decorators for filters.

Provides the ``@processor_version`` class decorator for stamping semantic
version strings on filter classes and ``@processor_tags`` for attaching
category and description metadata. The filter registry reads these to
produce the command-line filter listing.

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
2026-03-03

Modified
--------
2026-03-03
"""

# Standard library
from typing import Optional, Type, TypeVar
import importlib.metadata

# BMPKit vocabulary
from bmpkit.vocabulary import FilterCategory

T = TypeVar('T')


def processor_version(version: Optional[str] = None):
    """Class decorator that stamps a version on a filter class.

    Sets ``__processor_version__`` as a class attribute. If a version is
    not provided, it is inferred from the installed package metadata.

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g., ``'1.0.0'``).

    Returns
    -------
    Callable
        Class decorator that sets ``__processor_version__`` on the class.

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class MyFilter(ImageFilter):
    ...     alias = '-mine'
    ...     name = 'mine'
    ...     def _apply(self, raster, **params):
    ...         pass
    >>> MyFilter.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version('bmpkit')
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = "unknown"
        return cls
    return decorator


def processor_tags(
    category: Optional[FilterCategory] = None,
    description: Optional[str] = None,
):
    """Class decorator for filter capability metadata.

    Stamps ``__processor_tags__`` on the class with category and
    description metadata.

    Parameters
    ----------
    category : FilterCategory, optional
        Functional category of the filter.
    description : str, optional
        Short human-readable description of the filter's purpose.

    Raises
    ------
    TypeError
        If *category* is not a ``FilterCategory`` member.
    """
    if category is not None and not isinstance(category, FilterCategory):
        raise TypeError(
            f"category must be a FilterCategory member, got {category!r}"
        )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = {
            'category': category,
            'description': description,
        }
        return cls
    return decorator
