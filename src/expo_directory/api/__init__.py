"""
HTTP API for the directory service.

Run with::

    uvicorn expo_directory.api:create_app --factory --port 12000
"""

from expo_directory.api.app import create_app

__all__ = ["create_app"]
