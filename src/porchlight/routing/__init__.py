"""Routing — the explicit route table, consulted after static assets.

Routes are registered during setup and compiled into an immutable
lookup structure when the app freezes.
"""
