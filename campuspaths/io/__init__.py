"""Text input/output front ends for the graph engine.

This subpackage holds the pathfinder script interpreter used to drive
the graph and the search from plain-text scripts.
"""

from .script_driver import PathfinderScriptDriver

__all__ = ["PathfinderScriptDriver"]
