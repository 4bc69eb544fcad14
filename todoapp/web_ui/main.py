"""NiceGUI entrypoint for the task app web runtime."""

from __future__ import annotations

import argparse
import os
from typing import Any, Callable, Optional
from urllib.parse import quote

from nicegui import app, ui

from todoapp.domain.entities import FilterKind
from todoapp.utils.logging import configure_root
from todoapp.viewmodels.event import EventObserver
from todoapp.viewmodels.messages import (
    ADD_EDIT_RESULT_OK,
    DELETE_RESULT_OK,
    EDIT_RESULT_OK,
    message_text,
)
from todoapp.viewmodels.presenter import PresenterTask
from todoapp.web_ui.runtime import PageSession, WebRuntime

_PUMP_INTERVAL_S = 0.05

_FILTER_OPTIONS = {
    FilterKind.ALL.value: message_text("label_all"),
    FilterKind.ACTIVE.value: message_text("label_active"),
    FilterKind.COMPLETED.value: message_text("label_completed"),
}


def _install_theme() -> None:
    """Install global CSS for the web runtime."""
    ui.add_head_html(
        """
<style>
:root {
  --todo-bg: #f4f6f8;
  --todo-card: #ffffff;
  --todo-border: #d6dde5;
  --todo-muted: #5b6b7c;
}
body { background: var(--todo-bg); }
.todo-page { max-width: 760px; margin: 0 auto; padding: 14px; }
.todo-card {
  background: var(--todo-card);
  border: 1px solid var(--todo-border);
  border-radius: 10px;
}
.todo-muted { color: var(--todo-muted); }
.todo-done { text-decoration: line-through; color: var(--todo-muted); }
</style>
"""
    )


def _notify(code: str) -> None:
    ui.notify(message_text(code))


def _open_session(runtime: WebRuntime) -> PageSession:
    """Create the page session and bind its lifetime to the browser client."""
    session = runtime.open_session()
    ui.timer(_PUMP_INTERVAL_S, session.pump)
    runtime.bind_to_client(session, ui.context.client)
    return session


def _observe_event(session: PageSession, source: Any, handler: Callable[[Any], None]) -> None:
    session.observe(source, EventObserver(handler))


def _header(title: str) -> None:
    with ui.row().classes("w-full items-center justify-between q-mb-md"):
        ui.label(title).classes("text-h5")
        with ui.row().classes("q-gutter-sm"):
            ui.button("Tasks", on_click=lambda: ui.navigate.to("/")).props("flat")
            ui.button("Statistics", on_click=lambda: ui.navigate.to("/statistics")).props("flat")


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI pages for the runtime."""

    @ui.page("/")
    def index(result: Optional[int] = None) -> None:
        session = _open_session(runtime)
        vm = session.tasks()

        def on_filter_change(event: Any) -> None:
            vm.set_filtering(FilterKind(event.value))
            vm.load_tasks(False)

        def on_toggle(item: PresenterTask, event: Any) -> None:
            if bool(event.value) != item.completed:
                vm.complete_task(item, bool(event.value))

        @ui.refreshable
        def render_list() -> None:
            items = vm.items.get([])
            if vm.data_loading.get(False):
                ui.spinner(size="lg")
            if not items:
                with ui.column().classes("w-full items-center q-pa-lg"):
                    ui.icon(vm.no_task_icon.get("") or "inbox").classes("text-h3 todo-muted")
                    ui.label(message_text(vm.no_tasks_label.get("") or "no_tasks_all")).classes(
                        "todo-muted"
                    )
                    if vm.tasks_add_view_visible.get(False):
                        ui.button("Add a task", on_click=vm.add_new_task).props("flat")
                return
            with ui.column().classes("w-full todo-card q-pa-sm"):
                for item in items:
                    with ui.row().classes("w-full items-center no-wrap"):
                        ui.checkbox(
                            value=item.completed,
                            on_change=lambda e, it=item: on_toggle(it, e),
                        )
                        ui.label(item.title_for_list).classes(
                            "todo-done" if item.completed else ""
                        ).on("click", lambda _, tid=item.entry_id: vm.open_task(tid))

        with ui.column().classes("todo-page w-full"):
            _header("Todo")
            with ui.row().classes("w-full items-center justify-between"):
                filter_label = ui.label().classes("text-subtitle1")
                ui.select(
                    _FILTER_OPTIONS,
                    value=vm.current_filtering.value,
                    on_change=on_filter_change,
                )
            with ui.row().classes("q-gutter-sm q-mb-sm"):
                ui.button("New task", icon="add", on_click=vm.add_new_task)
                ui.button("Refresh", icon="refresh", on_click=vm.refresh).props("flat")
                ui.button("Clear completed", on_click=vm.clear_completed_tasks).props("flat")
            render_list()

        session.observe(vm.items, lambda _: render_list.refresh())
        session.observe(vm.data_loading, lambda _: render_list.refresh())
        session.observe(
            vm.current_filtering_label, lambda code: filter_label.set_text(message_text(code))
        )
        _observe_event(session, vm.snackbar_text, _notify)
        _observe_event(session, vm.open_task_event, lambda tid: ui.navigate.to(f"/tasks/{quote(tid)}"))
        _observe_event(session, vm.new_task_event, lambda _: ui.navigate.to("/edit"))
        vm.show_edit_result_message(result)

    @ui.page("/tasks/{task_id}")
    def task_detail(task_id: str) -> None:
        session = _open_session(runtime)
        vm = session.task_detail()

        @ui.refreshable
        def render_task() -> None:
            if vm.data_loading.get(False):
                ui.spinner(size="lg")
                return
            task = vm.task.get()
            if task is None:
                ui.label(message_text("no_task_found")).classes("todo-muted")
                return
            with ui.card().classes("todo-card w-full"):
                with ui.row().classes("items-center"):
                    ui.checkbox(
                        value=task.completed,
                        on_change=lambda e: vm.set_completed(bool(e.value))
                        if bool(e.value) != vm.completed.get(False)
                        else None,
                    )
                    ui.label(task.title).classes("text-h6")
                ui.label(task.description)
            with ui.row().classes("q-gutter-sm q-mt-md"):
                ui.button("Edit", icon="edit", on_click=vm.edit_task)
                ui.button("Delete", icon="delete", color="negative", on_click=vm.delete_task)

        with ui.column().classes("todo-page w-full"):
            _header("Task details")
            render_task()

        session.observe(vm.task, lambda _: render_task.refresh())
        session.observe(vm.data_loading, lambda _: render_task.refresh())
        _observe_event(session, vm.snackbar_text, _notify)
        _observe_event(
            session,
            vm.edit_task_event,
            lambda _: ui.navigate.to(f"/edit?task_id={quote(task_id)}"),
        )
        _observe_event(
            session, vm.delete_task_event, lambda _: ui.navigate.to(f"/?result={DELETE_RESULT_OK}")
        )
        vm.start(task_id)

    @ui.page("/edit")
    def add_edit_task(task_id: Optional[str] = None) -> None:
        session = _open_session(runtime)
        vm = session.add_edit_task()

        with ui.column().classes("todo-page w-full"):
            _header("Edit task" if task_id else "New task")
            title = ui.input("Title", on_change=lambda e: vm.title.set_value(e.value or ""))
            description = ui.textarea(
                "Description", on_change=lambda e: vm.description.set_value(e.value or "")
            )
            ui.button("Save", icon="done", on_click=vm.save_task)

        def sync_input(widget: Any, value: str) -> None:
            if widget.value != value:
                widget.value = value

        def on_updated(_: Any) -> None:
            code = ADD_EDIT_RESULT_OK if vm.is_new_task else EDIT_RESULT_OK
            ui.navigate.to(f"/?result={code}")

        session.observe(vm.title, lambda value: sync_input(title, value))
        session.observe(vm.description, lambda value: sync_input(description, value))
        _observe_event(session, vm.snackbar_text, _notify)
        _observe_event(session, vm.task_updated_event, on_updated)
        vm.start(task_id)

    @ui.page("/statistics")
    def statistics() -> None:
        session = _open_session(runtime)
        vm = session.statistics()

        @ui.refreshable
        def render_stats() -> None:
            if vm.data_loading.get(False):
                ui.spinner(size="lg")
                return
            if vm.error.get(False):
                ui.label(message_text("loading_tasks_error")).classes("todo-muted")
                return
            if vm.empty.get(True):
                ui.label(message_text("no_tasks_all")).classes("todo-muted")
                return
            with ui.card().classes("todo-card w-full"):
                ui.label(f"Active tasks: {vm.active_tasks_percent.get(0.0):.1f}%")
                ui.label(f"Completed tasks: {vm.completed_tasks_percent.get(0.0):.1f}%")

        with ui.column().classes("todo-page w-full"):
            _header("Statistics")
            ui.button("Refresh", icon="refresh", on_click=vm.refresh).props("flat")
            render_stats()

        session.observe(vm.data_loading, lambda _: render_stats.refresh())
        session.observe(vm.empty, lambda _: render_stats.refresh())
        session.observe(vm.active_tasks_percent, lambda _: render_stats.refresh())
        vm.start()

    app.on_shutdown(runtime.shutdown)


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the todo NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--settings-dir", default=None)
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    configure_root()
    runtime = WebRuntime(settings_dir=args.settings_dir)
    if args.smoke_test:
        payload = runtime.settings_payload()
        print("web-smoke-ok", payload.get("repository"))
        runtime.shutdown()
        return
    _install_theme()
    _build_ui(runtime)
    ui.run(
        host=args.host,
        port=args.port,
        title="Todo",
        reload=args.reload,
        show=False,
        storage_secret=os.environ.get("TODOAPP_WEB_STORAGE_SECRET", "todoapp-web-ui-secret"),
    )


if __name__ == "__main__":
    main()
