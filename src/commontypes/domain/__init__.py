"""Domain layer — value types, calendar arithmetic, zones, and clocks.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""
