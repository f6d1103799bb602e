"""FBWS - a small static site builder and server."""
