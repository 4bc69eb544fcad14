"""Adapter package for external I/O implementations.

Purpose:
    Concrete implementations of the ``TasksRepository`` port (in-memory and
    REST) plus local settings storage.

Dependencies:
    ``tasks_rest`` and ``http_client`` depend on ``requests``; the rest use the
    standard library only.

Call context:
    Imported by ``todoapp.app.factory`` for runtime wiring and by tests.
"""
