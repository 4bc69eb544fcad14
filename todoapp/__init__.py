"""Presentation layer for the to-do list application.

Layers follow MVVM + hexagonal boundaries: ``domain`` (entities and ports),
``usecases`` (single-operation wrappers), ``viewmodels`` (observable UI state
and commands), ``adapters`` (repository implementations) and ``app`` /
``web_ui`` (wiring and runtime).
"""
