"""Pytest root marker so `cuecanvas` imports from a source checkout."""
