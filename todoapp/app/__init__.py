"""Application composition layer.

Modules here wire adapters, use-cases and view models together and provide
the UI-thread dispatchers used by the runtimes, without placing business
logic in views.
"""
