"""Utility helpers for gaussian-catalog."""
