"""Domain layer — headings, commands, poses and the transition rules.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
