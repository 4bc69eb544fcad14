"""NiceGUI runtime orchestration for the task app.

This module composes settings, the repository and the view-model factory for
the web runtime. It does not import NiceGUI, so page sessions can be driven
from tests by draining their dispatcher by hand.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, List, Optional, TypeVar

from todoapp.adapters.storage_local import StorageLocal
from todoapp.app.dispatch import QueueDispatcher
from todoapp.app.factory import ViewModelFactory
from todoapp.app.settings import AppSettings, load_settings
from todoapp.utils import logging as logging_utils
from todoapp.viewmodels.add_edit_task_vm import AddEditTaskViewModel
from todoapp.viewmodels.live_data import LiveData, Observation
from todoapp.viewmodels.scope import ViewModel
from todoapp.viewmodels.statistics_vm import StatisticsViewModel
from todoapp.viewmodels.task_detail_vm import TaskDetailViewModel
from todoapp.viewmodels.tasks_vm import TasksViewModel

LOGGER = logging.getLogger(__name__)

VM = TypeVar("VM", bound=ViewModel)


class PageSession:
    """View models and observations belonging to one open browser page.

    NiceGUI runs page handlers and timers on its event loop thread, which is
    therefore the UI thread owning every ``LiveData`` created here. Worker
    results are queued on :attr:`dispatcher` and run when the page timer
    drains it.
    """

    def __init__(self, factory: ViewModelFactory) -> None:
        self._factory = factory
        self.dispatcher = QueueDispatcher()
        self._view_models: List[ViewModel] = []
        self._observations: List[Observation] = []
        self.closed = False

    def tasks(self) -> TasksViewModel:
        return self._track(self._factory.tasks_view_model(self.dispatcher))

    def task_detail(self) -> TaskDetailViewModel:
        return self._track(self._factory.task_detail_view_model(self.dispatcher))

    def add_edit_task(self) -> AddEditTaskViewModel:
        return self._track(self._factory.add_edit_task_view_model(self.dispatcher))

    def statistics(self) -> StatisticsViewModel:
        return self._track(self._factory.statistics_view_model(self.dispatcher))

    def observe(self, source: LiveData[Any], observer: Callable[[Any], None]) -> Observation:
        """Observe ``source`` until the page closes."""
        observation = source.observe(observer)
        self._observations.append(observation)
        return observation

    def pump(self) -> int:
        """Run queued view-model continuations; called by the page timer."""
        if self.closed:
            return 0
        return self.dispatcher.drain()

    def close(self) -> None:
        """Detach observers and clear every view model of the page."""
        if self.closed:
            return
        self.closed = True
        for observation in self._observations:
            observation.dispose()
        self._observations.clear()
        for vm in self._view_models:
            vm.clear()
        self._view_models.clear()

    def _track(self, vm: VM) -> VM:
        self._view_models.append(vm)
        return vm


class WebRuntime:
    """Process-wide state shared by all NiceGUI pages."""

    def __init__(self, *, settings_dir: Optional[str] = None, settings: Optional[AppSettings] = None) -> None:
        root = settings_dir or os.environ.get("TODOAPP_SETTINGS_DIR") or "."
        self.storage = StorageLocal(root_dir=root)
        self.settings = settings if settings is not None else self._load_settings()
        logging_utils.apply_preferences(self.settings.debug_logging)
        self.factory = ViewModelFactory.from_settings(self.settings)
        self._sessions: Dict[int, PageSession] = {}

    def open_session(self) -> PageSession:
        session = PageSession(self.factory)
        self._sessions[id(session)] = session
        return session

    def bind_to_client(self, session: PageSession, client: Any) -> None:
        """Close ``session`` when NiceGUI deletes ``client``.

        Deletion happens only after the reconnect timeout expires, so a short
        websocket drop keeps the page and its view models alive.
        """
        client.on_delete(lambda: self.close_session(session))

    def close_session(self, session: PageSession) -> None:
        session.close()
        self._sessions.pop(id(session), None)

    @property
    def session_count(self) -> int:
        return len(self._sessions)

    def settings_payload(self) -> Dict[str, Any]:
        return self.settings.to_dict()

    def shutdown(self) -> None:
        for session in list(self._sessions.values()):
            self.close_session(session)
        self.factory.shutdown()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _load_settings(self) -> AppSettings:
        try:
            return load_settings(self.storage)
        except (OSError, ValueError) as exc:
            LOGGER.warning("Could not load local settings, using defaults: %s", exc)
            return AppSettings.defaults()


__all__ = ["PageSession", "WebRuntime"]
