"""Portier command-line interface."""
