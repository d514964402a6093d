# -*- coding: utf-8 -*-
"""
Pipeline - Ordered chain of filter applications.

Threads a single raster through a sequence of ``(alias, parameters)``
steps. Each alias is resolved against a ``FilterRegistry`` in the same
loop that applies it, so an unknown alias or a bad parameter list is
reported by the step that owns it, after the earlier steps have already
modified the raster and before any later step is looked at.

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
2026-03-12
"""

# Standard library
import logging
from typing import List, Optional, Sequence, Tuple

# BMPKit internal
from bmpkit.image_processing.registry import FilterRegistry
from bmpkit.raster import Raster

logger = logging.getLogger(__name__)


class Pipeline:
    """Sequential chain of filters.

    Parameters
    ----------
    steps : Sequence[Tuple[str, Sequence[str]]]
        ``(alias, parameter tokens)`` groups, in application order. May
        be empty.
    registry : FilterRegistry, optional
        Registry used to resolve aliases. Defaults to
        ``FilterRegistry.default()``.

    Examples
    --------
    >>> pipe = Pipeline([('-crop', ['800', '600']), ('-gs', [])])
    >>> pipe.apply(raster)
    """

    def __init__(
        self,
        steps: Sequence[Tuple[str, Sequence[str]]],
        registry: Optional[FilterRegistry] = None,
    ) -> None:
        if registry is None:
            registry = FilterRegistry.default()
        self.registry = registry
        self._steps: List[Tuple[str, List[str]]] = [
            (alias, list(parameters)) for alias, parameters in steps
        ]

    @property
    def steps(self) -> List[Tuple[str, List[str]]]:
        """Shallow copy of the ``(alias, parameters)`` steps."""
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        step_names = [alias for alias, _ in self._steps]
        return f"Pipeline({step_names})"

    def apply(self, raster: Raster) -> Raster:
        """Resolve and apply every step to ``raster`` in order.

        Each alias is looked up only when its turn comes, so an error in
        step ``k`` is raised after steps ``1 .. k-1`` have modified the
        raster and before any later alias is examined.

        Returns
        -------
        Raster
            The same raster object, for chaining.

        Raises
        ------
        InvalidArgumentsError
            If a step's alias is not registered.
        InvalidFilterParametersError
            If a filter rejects its parameters.
        """
        n = len(self._steps)
        for i, (alias, parameters) in enumerate(self._steps):
            step = self.registry.resolve(alias)
            logger.debug("Pipeline step %d/%d: %s %s", i + 1, n,
                         alias, ' '.join(parameters))
            step.apply(raster, parameters)
        return raster
