"""Frontends - user interfaces on top of stitch.core."""
