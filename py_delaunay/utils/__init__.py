"""Shared helpers: default random generator and logging setup."""
