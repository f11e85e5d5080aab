"""
Endpoint subpackage for API v1.

``events`` holds the event catalogue routes and ``attendees`` the
registration routes.  Both are aggregated in ``router.py``.
"""
