"""
Test suite for the playback engine.

Focus areas:
- Producer determinism and non-mutation
- Event log shape and payload snapshots
- Timeline tick semantics and seek
- Animator scheduling, speed and reset
"""
