# -*- coding: utf-8 -*-
"""
Filter Parameter Annotations - Declarative parameter constraints via typing.Annotated.

Provides constraint marker types (``Range``, ``Desc``) for use inside
``typing.Annotated`` annotations on ``ImageFilter`` subclasses, plus the
``ParamSpec`` introspection class and the collection utility consumed by
``ImageFilter.__init_subclass__``.

Filters receive their parameters as ordered string tokens from the command
line. Each annotated field declares one positional parameter, in
declaration order; ``ParamSpec.parse`` converts a token to the declared
type and checks it against the declared range.

Usage
-----
Declare parameters as class-body annotations::

    from typing import Annotated
    from bmpkit.image_processing.params import Range, Desc

    class MyFilter(ImageFilter):
        sigma: Annotated[float, Range(min=0.0), Desc('Gaussian sigma')]

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
2026-03-12
"""

# Standard library
import math
from typing import (
    Annotated,
    Any,
    Optional,
    Tuple,
    Union,
    get_origin,
    get_type_hints,
)


# =====================================================================
# Constraint marker types  (used inside Annotated[...])
# =====================================================================

class ParamMeta:
    """Base marker for filter parameter metadata in ``Annotated`` types.

    Any ``Annotated`` class-body field whose metadata includes at least one
    ``ParamMeta`` subclass instance is treated as a filter parameter by
    ``ImageFilter.__init_subclass__``.
    """


class Range(ParamMeta):
    """Inclusive numeric range constraint.

    Parameters
    ----------
    min : int or float, optional
        Minimum allowed value (inclusive).
    max : int or float, optional
        Maximum allowed value (inclusive).
    """

    __slots__ = ('min', 'max')

    def __init__(
        self,
        min: Optional[Union[int, float]] = None,
        max: Optional[Union[int, float]] = None,
    ) -> None:
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        parts = []
        if self.min is not None:
            parts.append(f"min={self.min!r}")
        if self.max is not None:
            parts.append(f"max={self.max!r}")
        return f"Range({', '.join(parts)})"


class Desc(ParamMeta):
    """Human-readable parameter description.

    Parameters
    ----------
    text : str
        Description text shown in the command-line help.
    """

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


# =====================================================================
# ParamSpec - processed introspection data class
# =====================================================================

class ParamSpec:
    """Resolved specification for a single positional filter parameter.

    Attributes
    ----------
    name : str
        Parameter name.
    param_type : type
        Expected Python type (``int`` or ``float``).
    description : str
        Human-readable description.
    min_value : int, float, or None
        Inclusive minimum (from ``Range``).
    max_value : int, float, or None
        Inclusive maximum (from ``Range``).
    """

    __slots__ = (
        'name', 'param_type', 'description', 'min_value', 'max_value',
    )

    def __init__(
        self,
        name: str,
        param_type: type,
        description: str,
        min_value: Optional[Union[int, float]],
        max_value: Optional[Union[int, float]],
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.description = description
        self.min_value = min_value
        self.max_value = max_value

    def parse(self, token: str) -> Any:
        """Convert a string token to ``param_type`` and validate it.

        Tokens use plain decimal digits: ``int`` parameters take an
        optionally signed integer (``'200.5'`` is rejected, not
        truncated), ``float`` parameters any decimal or exponent form.
        Digit-group underscores such as ``'1_000'`` are rejected.

        Raises
        ------
        ValueError
            If the token cannot be parsed, is not finite, or is out of
            range.
        """
        error = ValueError(
            f"Parameter '{self.name}' expects "
            f"{self.param_type.__name__}, got {token!r}"
        )
        if '_' in token:
            raise error
        try:
            value = self.param_type(token.strip())
        except (TypeError, ValueError):
            raise error from None
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(
                f"Parameter '{self.name}' must be finite, got {token!r}"
            )
        self.validate(value)
        return value

    def validate(self, value: Any) -> None:
        """Validate *value* against this spec's type and range.

        ``int`` is accepted when ``param_type`` is ``float``. Range bounds
        are inclusive.

        Raises
        ------
        TypeError
            If *value* has the wrong type.
        ValueError
            If *value* violates the range constraint.
        """
        if self.param_type is float:
            if not isinstance(value, (int, float)):
                raise TypeError(
                    f"Parameter '{self.name}' must be "
                    f"{self.param_type.__name__}, got {type(value).__name__}"
                )
        elif not isinstance(value, self.param_type):
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got {type(value).__name__}"
            )

        if self.min_value is not None and value < self.min_value:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {self.min_value!r}"
            )
        if self.max_value is not None and value > self.max_value:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )

    def __repr__(self) -> str:
        parts = (
            f"ParamSpec(name={self.name!r}, "
            f"param_type={self.param_type.__name__}"
        )
        if self.min_value is not None:
            parts += f", min_value={self.min_value!r}"
        if self.max_value is not None:
            parts += f", max_value={self.max_value!r}"
        return parts + ")"


# =====================================================================
# Annotation collection
# =====================================================================

def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Parse ``Annotated`` type hints on *cls* into a tuple of ``ParamSpec``.

    Only fields whose ``Annotated`` metadata includes at least one
    ``ParamMeta`` instance are collected. Fields are ordered by MRO
    (parent-first, preserving declaration order within each class), which
    is also the order of the positional string parameters.
    """
    hints = get_type_hints(cls, include_extras=True)

    seen: set = set()
    ordered_names: list = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name not in seen and name in hints:
                seen.add(name)
                ordered_names.append(name)

    specs: list = []
    for name in ordered_names:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue

        param_metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not param_metas:
            continue

        range_meta: Optional[Range] = None
        desc_meta: Optional[Desc] = None
        for m in param_metas:
            if isinstance(m, Range):
                range_meta = m
            elif isinstance(m, Desc):
                desc_meta = m

        specs.append(ParamSpec(
            name=name,
            param_type=hint.__args__[0],
            description=desc_meta.text if desc_meta else '',
            min_value=range_meta.min if range_meta else None,
            max_value=range_meta.max if range_meta else None,
        ))

    return tuple(specs)
