# -*- coding: utf-8 -*-
"""
Command-Line Driver - Decode, filter, and re-encode a bitmap.

Usage::

    bmpkit INPUT.bmp OUTPUT.bmp [-filter [param ...]] [-filter [param ...]] ...

Every token that starts with ``-`` after the two paths begins a new filter
group; the tokens that follow it, up to the next such token, are that
filter's parameters. A negative number is therefore read as a filter
name: in ``-blur -0.5`` the blur step runs first with no parameters and
fails with ``InvalidFilterParametersError`` before ``-0.5`` is looked up.

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
2026-03-06

Modified
--------
2026-03-12
"""

# Standard library
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

# BMPKit internal
from bmpkit import IO
from bmpkit.exceptions import BmpkitError, InvalidArgumentsError
from bmpkit.image_processing import FilterRegistry, Pipeline

logger = logging.getLogger(__name__)


def tokenize_filters(tokens: Sequence[str]) -> List[Tuple[str, List[str]]]:
    """Split a flat token list into ``(alias, parameters)`` groups.

    Parameters
    ----------
    tokens : Sequence[str]
        Tokens following the input and output paths.

    Returns
    -------
    List[Tuple[str, List[str]]]
        Groups in the order they appear.

    Raises
    ------
    InvalidArgumentsError
        If a parameter appears before any filter alias.

    Examples
    --------
    >>> tokenize_filters(['-crop', '800', '600', '-gs'])
    [('-crop', ['800', '600']), ('-gs', [])]
    """
    groups: List[Tuple[str, List[str]]] = []
    for token in tokens:
        if token.startswith('-'):
            groups.append((token, []))
        elif not groups:
            raise InvalidArgumentsError(
                f"parameter {token!r} given before any filter"
            )
        else:
            groups[-1][1].append(token)
    return groups


def run(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    tokens: Sequence[str] = (),
    registry: Optional[FilterRegistry] = None,
) -> None:
    """Decode ``input_path``, apply the filter tokens, encode ``output_path``.

    Both extensions are checked before the input is decoded. Filter
    aliases are resolved one at a time as the pipeline runs, so nothing
    is written when any step fails.

    Raises
    ------
    UnsupportedFormatError
        If either path is not a ``.bmp`` file or the input is not the
        supported bitmap variant.
    InvalidArgumentsError
        If the tokens are malformed or name an unknown filter.
    InvalidFilterParametersError
        If a filter rejects its parameters.
    NotFoundError, CreationError
        If the input cannot be read or the output cannot be created.
    """
    IO.check_extension(input_path)
    IO.check_extension(output_path)

    pipeline = Pipeline(tokenize_filters(tokens), registry=registry)

    raster = IO.read(input_path)
    logger.info("Read %s (%d x %d)", input_path, raster.height, raster.width)
    pipeline.apply(raster)
    IO.write(raster, output_path)
    logger.info("Wrote %s (%d x %d)", output_path, raster.height, raster.width)


def build_parser(registry: FilterRegistry) -> argparse.ArgumentParser:
    """Build the argument parser; the filter list goes in the epilog."""
    parser = argparse.ArgumentParser(
        prog='bmpkit',
        description='Apply a chain of filters to a 24-bit BMP image.',
        epilog='filters:\n  ' + '\n  '.join(registry.describe()),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--list-filters', action='store_true',
                        help='List available filters and exit')
    parser.add_argument('input', nargs='?', help='Input .bmp path')
    parser.add_argument('output', nargs='?', help='Output .bmp path')
    parser.add_argument('filters', nargs=argparse.REMAINDER,
                        help='Filter aliases, each followed by its parameters')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console entry point.

    Returns
    -------
    int
        ``0`` on success or when only help was printed, ``1`` on a
        BMPKit error.
    """
    registry = FilterRegistry.default()
    parser = build_parser(registry)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.list_filters:
        print('\n'.join(registry.describe()))
        return 0

    if args.input is None or args.output is None:
        parser.print_help()
        return 0

    try:
        run(args.input, args.output, args.filters, registry=registry)
    except BmpkitError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
