"""Domain layer — segments, qualified names, patterns and record identity.

This layer depends only on stdlib and pydantic.
It must never import from services, config, output, or commands.
"""
