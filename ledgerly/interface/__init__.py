"""Mini README: Interactive interfaces for Ledgerly.

Exports the FastAPI application factory that serves the browser dashboard
and its JSON API.
"""

from .web_app import create_application

__all__ = ["create_application"]
