"""HTTP client for the gaussian-catalog REST API."""

from gaussian_catalog.client.api_helper import ApiHelper, ApiRequestError, CatalogEndpoint

__all__ = ["ApiHelper", "ApiRequestError", "CatalogEndpoint"]
