"""
Cross‑cutting application concerns: configuration, logging, the
API‑key check and startup seed data.
"""
