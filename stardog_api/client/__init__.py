"""Stardog HTTP API client."""
