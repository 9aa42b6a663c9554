"""Client for the catalog REST API.

``ApiHelper`` owns the HTTP session; each collection is reached through a
``CatalogEndpoint`` attribute (``helper.base_methods.get_all()``) that returns
domain shapes rebuilt with ``from_dict``.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from gaussian_catalog.core.models import ENTITY_FAMILIES
from gaussian_catalog.utils.config import get_config_value

logger = logging.getLogger(__name__)


class ApiRequestError(Exception):
    """Raised when a request to the catalog API fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ApiHelper:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the API helper.

        Args:
            base_url: Root URL of the API, defaults to API_BASE_URL
            timeout: Request timeout in seconds, defaults to API_TIMEOUT
            session: A requests session to reuse
        """
        self.base_url = (base_url or get_config_value("api_base_url")).rstrip("/")
        self.timeout = timeout or get_config_value("api_timeout")
        self.session = session or requests.Session()
        self.session.headers.update(
            {"Content-Type": "application/json", "Accept": "application/json"}
        )

        self.method_families = CatalogEndpoint(self, "MethodFamilies", "method_family")
        self.spin_states = CatalogEndpoint(self, "SpinStates", "spin_state")
        self.electronic_states = CatalogEndpoint(
            self, "ElectronicStates", "electronic_state"
        )
        self.calculation_types = CatalogEndpoint(
            self, "CalculationTypes", "calculation_type"
        )
        self.base_methods = CatalogEndpoint(self, "BaseMethods", "base_method")
        self.electronic_state_method_families = CatalogEndpoint(
            self, "ElectronicStatesMethodFamilies", "electronic_state_method_family"
        )
        self.spin_state_electronic_state_method_families = CatalogEndpoint(
            self,
            "SpinStatesElectronicStatesMethodFamilies",
            "spin_state_electronic_state_method_family",
        )
        self.full_methods = CatalogEndpoint(self, "FullMethods", "full_method")

    def request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            ApiRequestError: On transport errors and non-2xx responses
        """
        url = f"{self.base_url}/api/v1/{endpoint.lstrip('/')}"
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(
                method, url, json=json_data, params=params, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            error_message = f"Catalog API request failed: {e}"
            if e.response is not None:
                error_message += f" | Response: {e.response.text}"
            logger.error(error_message)
            status_code = e.response.status_code if e.response is not None else None
            raise ApiRequestError(error_message, status_code) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Catalog API request failed: {e}")
            raise ApiRequestError(f"Catalog API request failed: {e}") from e

        if not response.content:
            return None
        return response.json()


class CatalogEndpoint:
    """Operations on one API collection."""

    def __init__(self, helper: ApiHelper, collection: str, family: str):
        self.helper = helper
        self.collection = collection
        self.family = ENTITY_FAMILIES[family]

    def get_all(self) -> List[Any]:
        """Get all entities as Full models."""
        data = self.helper.request("GET", self.collection)
        return [self.family.full.from_dict(item) for item in data]

    def get_all_simple(self) -> List[Any]:
        data = self.helper.request("GET", f"{self.collection}/Simple")
        return [self.family.simple.from_dict(item) for item in data]

    def get_all_intermediate(self) -> List[Any]:
        data = self.helper.request("GET", f"{self.collection}/Intermediate")
        return [self.family.intermediate.from_dict(item) for item in data]

    def get_list(self) -> List[Any]:
        """Get all entities as Records."""
        data = self.helper.request("GET", f"{self.collection}/List")
        return [self.family.record.from_dict(item) for item in data]

    def get_by(self, route: str, **params) -> List[Any]:
        """Call a relationship lookup route, e.g. ``get_by("Family", methodFamilyId=3)``."""
        data = self.helper.request(
            "GET", f"{self.collection}/{route}", params=params
        )
        return [self.family.full.from_dict(item) for item in data]

    def get(self, entity_id: int) -> Optional[Any]:
        """Get one entity as a Full model, or None if it does not exist."""
        try:
            data = self.helper.request("GET", f"{self.collection}/{entity_id}")
        except ApiRequestError as e:
            if e.status_code == 404:
                return None
            raise
        return self.family.full.from_dict(data)

    def create(self, model) -> Any:
        """Create an entity from its Simple model (Full model for leaf entities)."""
        data = self.helper.request("POST", self.collection, json_data=model.to_dict())
        return self.family.full.from_dict(data)

    def update(self, model) -> Any:
        data = self.helper.request(
            "PUT", f"{self.collection}/{model.id}", json_data=model.to_dict()
        )
        return self.family.full.from_dict(data)

    def delete(self, entity_id: int) -> None:
        """Archive an entity."""
        self.helper.request("DELETE", f"{self.collection}/{entity_id}")
