"""Shared helpers for sourceloader."""
