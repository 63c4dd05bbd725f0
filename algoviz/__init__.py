"""
AlgoViz Playback Engine

Event-sourced algorithm execution with deterministic, scrubbable playback.
"""

__version__ = "0.1.0"
