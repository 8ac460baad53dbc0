"""Domain models and static tables.

Why:
- Pure data structures (Pydantic v2) and the setup templates live here.
- The domain knows nothing about git, uv, HTTP or the CLI.
"""
