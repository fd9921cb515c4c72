"""Notification and confirmation capabilities handed to the controllers.

Controllers never talk to the UI directly: they receive a `Notifier` to report
the outcome of every store operation and a `Confirmer` to ask yes/no questions.
The Streamlit adapters live in `ui.components.feedback`; tests pass plain callables.
"""
from typing import Callable

from domain.models import Notification

Notifier = Callable[[Notification], None]
Confirmer = Callable[[str], bool]


def success(notify: Notifier, message: str):
    notify(Notification(kind="success", message=message))


def failure(notify: Notifier, prefix: str, exc: Exception):
    notify(Notification(kind="error", message=f"{prefix}{exc}"))
