"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Pet CRUD handlers and the small demonstration routes each
expose a router defined in ``api/v1/endpoints``; the routers are
aggregated in ``api/v1/router.py`` and mounted by ``main.create_app``.
"""

from .main import app  # noqa: F401
