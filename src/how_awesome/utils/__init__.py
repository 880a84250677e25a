"""Shared utilities for how-awesome."""
