"""View modules for manual routing.

This project uses a custom router in `app.py` instead of Streamlit's automatic
multi-page system. Each page lives under `views/` and exposes a `view(store)`
function that receives the process-wide user store.

Add any new page as a module with a `view()` callable and register it in
`PAGE_REGISTRY` inside `app.py`.
"""
