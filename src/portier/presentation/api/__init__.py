"""Portier REST API (FastAPI)."""
