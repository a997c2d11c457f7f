"""Temporary path tracking."""
