"""
Shared helpers for settings and logging.
Both the API process and the storage bootstrap scripts import from here.
"""
