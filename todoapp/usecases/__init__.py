"""Use-case layer wrapping single repository operations.

Each module exposes one callable dataclass bound to a ``TasksRepository``.
Use-cases keep no state; they exist so view models depend on operations
instead of on the repository's shape.
"""
