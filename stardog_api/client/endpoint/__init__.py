"""Stardog client resource endpoints."""
