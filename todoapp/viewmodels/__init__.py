"""ViewModel package for UI state and command surfaces.

Call context:
    ``todoapp.app.factory`` builds the concrete view models; runtimes in
    ``todoapp.web_ui`` observe their ``LiveData`` fields and call commands.

Dependencies:
    Modules in this package depend on domain types and use-cases only.
    Repository adapters and UI toolkits remain outside.

Responsibilities:
    - Expose observable UI state (``LiveData``) and one-shot effects (``Event``).
    - Map domain tasks into view-facing ``PresenterTask`` rows.
    - Tie background work to the view model lifetime (``ViewModelScope``).
"""
