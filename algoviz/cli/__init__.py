"""
AlgoViz CLI - step-by-step algorithm playback in the terminal

Commands:
- algoviz algorithms - List registered algorithms / show display source
- algoviz log - Produce and print an event log with its digest
- algoviz play - Play an event log through the Animator
"""

from .. import __version__

__all__ = ["__version__"]
