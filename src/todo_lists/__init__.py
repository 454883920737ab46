"""
Session-scoped todo lists served by FastAPI.

The application instance lives in ``todo_lists.main``.
"""
