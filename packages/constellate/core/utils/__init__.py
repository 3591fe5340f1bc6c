"""Shared utilities for Constellate."""
