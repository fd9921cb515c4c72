"""
This package provides a collection of reusable UI components for the Streamlit application.

It is organized into several modules, each containing a specific category of components:
- `base`: CSS injection, page headers and inline field errors.
- `feedback`: Session-backed notifier/confirmer adapters and their rendering.
- `navigation`: Client-side route changes.
- `user_form`: Registration form fields bound to the registration controller.
- `user_table`: The editable user table bound to the listing controller.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    page_header,
    field_error,
)

from .feedback import (
    SessionNotifier,
    SessionConfirm,
    render_notifications,
    ask_confirmation,
)

from .navigation import navigate
