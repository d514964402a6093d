# -*- coding: utf-8 -*-
"""
Image Filter Base Class - Abstract interface for raster filters.

Defines ``ImageFilter``, the common base class of every filter in the
engine. All filters share one contract::

    filter.apply(raster, parameters)

where ``parameters`` is the ordered list of string tokens that followed the
filter alias on the command line. ``apply`` parses and validates the
tokens against the parameters the subclass declares through
``typing.Annotated`` class-body fields (see
:mod:`bmpkit.image_processing.params`), then mutates the raster in place,
either directly or by swapping in a freshly built grid.

Any arity, parse, or range failure raises
``InvalidFilterParametersError`` carrying the filter's ``name``.

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
2026-03-03

Modified
--------
2026-03-09
"""

# Standard library
import logging
import warnings
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Sequence, Tuple

# BMPKit internal
from bmpkit.exceptions import InvalidFilterParametersError
from bmpkit.image_processing.params import ParamSpec, collect_param_specs
from bmpkit.raster import Raster

logger = logging.getLogger(__name__)


class ImageFilter(ABC):
    """
    Common base class for all raster filters.

    Filters are stateless: everything an application needs comes from the
    raster and the parameter tokens, so one instance can be reused for any
    number of applications.

    Subclasses set two class attributes and implement ``_apply``:

    ``alias``
        Command-line token that selects the filter (e.g. ``'-crop'``).
    ``name``
        Human-readable name used in error messages (e.g. ``'crop'``).

    Positional parameters are declared as ``Annotated`` fields and
    collected into ``__param_specs__`` by ``__init_subclass__``.
    """

    alias: ClassVar[str] = ''
    name: ClassVar[str] = ''

    #: Tuple of :class:`~bmpkit.image_processing.params.ParamSpec` built
    #: automatically by ``__init_subclass__`` from ``Annotated`` fields.
    __param_specs__: Tuple[ParamSpec, ...] = ()

    # Track which classes have been checked to warn only once per class.
    _version_warned_classes: set = set()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageFilter':
        if cls not in ImageFilter._version_warned_classes:
            ImageFilter._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        return super().__new__(cls)

    @classmethod
    def usage(cls) -> str:
        """Command-line usage string, e.g. ``'-crop width height'``."""
        return ' '.join([cls.alias] + [s.name for s in cls.__param_specs__])

    def _parse_parameters(self, parameters: Sequence[str]) -> Dict[str, Any]:
        """Convert ordered string tokens into validated keyword values.

        Parameters
        ----------
        parameters : Sequence[str]
            Tokens that followed the filter alias.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: parsed_value}`` for every declared parameter.

        Raises
        ------
        InvalidFilterParametersError
            If the token count differs from the declared parameter count
            or any token fails to parse or validate.
        """
        specs = type(self).__param_specs__
        if len(parameters) != len(specs):
            raise InvalidFilterParametersError(
                self.name,
                f"expected {len(specs)} parameter(s), got {len(parameters)}",
            )

        resolved: Dict[str, Any] = {}
        for spec, token in zip(specs, parameters):
            try:
                resolved[spec.name] = spec.parse(token)
            except (TypeError, ValueError) as exc:
                raise InvalidFilterParametersError(self.name, str(exc)) from exc
        return resolved

    def apply(self, raster: Raster, parameters: Sequence[str] = ()) -> None:
        """
        Apply the filter to ``raster`` in place.

        Parameters
        ----------
        raster : Raster
            Raster to transform. Its grid may be replaced wholesale.
        parameters : Sequence[str]
            Ordered parameter tokens from the command line.

        Raises
        ------
        InvalidFilterParametersError
            If the parameters are malformed or out of range.
        """
        params = self._parse_parameters(list(parameters))
        logger.debug(
            "Applying %s to %d x %d raster with %s",
            type(self).__qualname__, raster.height, raster.width, params,
        )
        self._apply(raster, **params)

    @abstractmethod
    def _apply(self, raster: Raster, **params: Any) -> None:
        """
        Filter-specific transformation with already validated parameters.

        Parameters
        ----------
        raster : Raster
            Raster to transform in place.
        **params
            Parsed parameter values keyed by name.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(alias={self.alias!r})"
