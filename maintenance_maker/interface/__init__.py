"""Mini README: Interactive interfaces for Maintenance Maker.

Exports the FastAPI application factory that serves the browser-based entry
form and report download.
"""

from .web_app import create_application

__all__ = ["create_application"]
