from .rangetree import RangeTree, Assigned, build, repeat
from .render import render_tree
from .driver import CommandError, run_commands
from .driver_options import DriverOptions

__all__ = [
    "Assigned",
    "CommandError",
    "DriverOptions",
    "RangeTree",
    "build",
    "render_tree",
    "repeat",
    "run_commands",
]
