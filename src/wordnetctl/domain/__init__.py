"""Domain layer — graph structure, ancestor search, and error types.

This layer depends on the stdlib only.
It must never import from services, infrastructure, commands, or config.
"""
