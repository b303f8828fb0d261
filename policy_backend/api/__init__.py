"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from policy_backend.api import app

    uvicorn policy_backend.api:app --reload
"""

from policy_backend.api.app import app

__all__ = ["app"]
