"""Domain layer: play catalog models, pricing and credit rules, statements.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
