"""REST API for gaussian-catalog."""
