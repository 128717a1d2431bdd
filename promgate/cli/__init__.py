"""Command-line interface for promgate.

Turns argv into a FlagSet and drives the startup pipeline.
"""

__all__: list[str] = []
