"""Tests for the REST API client."""

from unittest.mock import MagicMock

import pytest
import requests

from gaussian_catalog.client import ApiHelper, ApiRequestError
from gaussian_catalog.core.models import (
    BaseMethodFullModel,
    BaseMethodSimpleModel,
    MethodFamilyRecord,
)

BASE_URL = "http://catalog.test"

METHOD_FAMILY = {
    "id": 3,
    "name": "Hartree-Fock",
    "description_rtf": None,
    "description_text": None,
    "created_date": "2024-01-02T03:04:05",
    "last_updated_date": "2024-01-02T03:04:05",
    "archived": False,
}

BASE_METHOD = {
    "id": 1,
    "keyword": "HF",
    "method_family": METHOD_FAMILY,
    "description_rtf": None,
    "description_text": None,
    "created_date": "2024-01-02T03:04:05",
    "last_updated_date": "2024-01-02T03:04:05",
    "archived": False,
}


def _response(payload=None, status_code=200, content=b"{}"):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.text = str(payload)
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def helper(session):
    return ApiHelper(base_url=f"{BASE_URL}/", timeout=5, session=session)


class TestRequest:
    """Tests for ApiHelper.request."""

    def test_builds_url_and_passes_timeout(self, helper, session):
        session.request.return_value = _response([])

        assert helper.request("GET", "BaseMethods") == []

        session.request.assert_called_once_with(
            "GET",
            f"{BASE_URL}/api/v1/BaseMethods",
            json=None,
            params=None,
            timeout=5,
        )

    def test_http_error_raises(self, helper, session):
        session.request.return_value = _response({"detail": "bad"}, status_code=400)

        with pytest.raises(ApiRequestError) as exc_info:
            helper.request("POST", "BaseMethods", json_data={})

        assert exc_info.value.status_code == 400

    def test_transport_error_raises(self, helper, session):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(ApiRequestError) as exc_info:
            helper.request("GET", "BaseMethods")

        assert exc_info.value.status_code is None

    def test_empty_body_returns_none(self, helper, session):
        session.request.return_value = _response(None, content=b"")

        assert helper.request("DELETE", "BaseMethods/1") is None


class TestCatalogEndpoint:
    """Tests for the per-collection operations."""

    def test_get_all_returns_full_models(self, helper, session):
        session.request.return_value = _response([BASE_METHOD])

        (model,) = helper.base_methods.get_all()

        assert isinstance(model, BaseMethodFullModel)
        assert model.method_family.name == "Hartree-Fock"
        assert model.to_simple_model().method_family_id == 3

    def test_get_list_returns_records(self, helper, session):
        session.request.return_value = _response([{"id": 3, "name": "Hartree-Fock"}])

        assert helper.method_families.get_list() == [MethodFamilyRecord(3, "Hartree-Fock")]
        assert session.request.call_args[0][1] == f"{BASE_URL}/api/v1/MethodFamilies/List"

    def test_get_missing_returns_none(self, helper, session):
        session.request.return_value = _response({"detail": "missing"}, status_code=404)

        assert helper.base_methods.get(42) is None

    def test_get_server_error_raises(self, helper, session):
        session.request.return_value = _response({"detail": "boom"}, status_code=500)

        with pytest.raises(ApiRequestError):
            helper.base_methods.get(42)

    def test_create_posts_simple_model(self, helper, session):
        session.request.return_value = _response(BASE_METHOD)
        simple = BaseMethodSimpleModel(keyword="HF", method_family_id=3)

        created = helper.base_methods.create(simple)

        method, url = session.request.call_args[0]
        assert method == "POST"
        assert url == f"{BASE_URL}/api/v1/BaseMethods"
        assert session.request.call_args[1]["json"]["method_family_id"] == 3
        assert created.id == 1

    def test_update_puts_to_model_id(self, helper, session):
        session.request.return_value = _response(BASE_METHOD)
        simple = BaseMethodSimpleModel(id=1, keyword="HF", method_family_id=3)

        helper.base_methods.update(simple)

        method, url = session.request.call_args[0]
        assert method == "PUT"
        assert url == f"{BASE_URL}/api/v1/BaseMethods/1"

    def test_get_by_sends_query_parameters(self, helper, session):
        session.request.return_value = _response([BASE_METHOD])

        helper.base_methods.get_by("Family", methodFamilyId=3)

        assert session.request.call_args[1]["params"] == {"methodFamilyId": 3}

    def test_delete(self, helper, session):
        session.request.return_value = _response({"success": True})

        helper.full_methods.delete(8)

        method, url = session.request.call_args[0]
        assert method == "DELETE"
        assert url == f"{BASE_URL}/api/v1/FullMethods/8"
