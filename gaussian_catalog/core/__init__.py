"""Core domain layer for gaussian-catalog."""
