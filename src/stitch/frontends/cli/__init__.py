"""Command line interface.

Entry point: ``stitch`` (see main.py). Commands live in flow.py
and components.py and are registered on the group in root.py.
"""
