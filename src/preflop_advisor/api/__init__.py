"""HTTP API (FastAPI).

Run with ``uvicorn preflop_advisor.api:app``.
"""

from .app import create_app

app = create_app()

__all__ = ["app", "create_app"]
