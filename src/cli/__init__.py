"""Command-line tools for groupieTracker.

- ``python -m src.cli.snapshot summary`` -- fetch and count the directory
- ``python -m src.cli.snapshot dump -o FILE`` -- fetch and write it as JSON
"""
