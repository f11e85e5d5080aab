"""
Version 1 of the API.

The routes keep the ``/eventreg/...`` paths used by existing clients.
Breaking changes should be introduced in a new version subpackage.
"""
