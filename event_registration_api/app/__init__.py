"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The value models live in ``schemas``, the in‑memory
store and the registration rules live in ``services`` and the HTTP
routes live in ``api/v1/endpoints``.  Versioning is handled by
grouping routers under the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
