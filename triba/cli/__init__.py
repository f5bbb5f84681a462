"""Terminal front end for Triba.

The rules engine only understands board points; this package is the
presentation collaborator that maps typed input (point indices or layout
coordinates) onto them and prints the outcome of every selection.

Usage:
    triba-play --board circle --variant dynamic --seed 7

    from triba.cli import closest_point, run_session
"""

from triba.cli.play import (
    build_parser,
    closest_point,
    main,
    parse_selection,
    run_session,
)

__all__ = [
    "build_parser",
    "closest_point",
    "main",
    "parse_selection",
    "run_session",
]
