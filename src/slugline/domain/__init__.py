"""Domain layer — the composite slug codec and entity slug rules.

This layer depends only on stdlib, pydantic, and python-slugify.
It must never import from services, commands, or config.
"""
