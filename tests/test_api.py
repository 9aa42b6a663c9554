"""Tests for the FastAPI server."""

import pytest
from fastapi.testclient import TestClient

from gaussian_catalog.api.server import app, get_storage

API = "/api/v1"


@pytest.fixture
def client(storage):
    app.dependency_overrides[get_storage] = lambda: storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "Gaussian catalog API is running"


class TestCollections:
    """Tests for the generic collection routes."""

    def test_create_and_get(self, client):
        response = client.post(f"{API}/MethodFamilies", json={"name": "DFT"})

        assert response.status_code == 201
        created = response.json()
        assert created["id"] > 0
        assert created["name"] == "DFT"

        response = client.get(f"{API}/MethodFamilies/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_create_ignores_posted_id(self, client, seeded):
        reposted = client.post(
            f"{API}/MethodFamilies", json={"id": seeded.hartree_fock.id, "name": "MP2"}
        )
        chosen = client.post(f"{API}/MethodFamilies", json={"id": 999, "name": "CCSD"})

        assert reposted.status_code == 201
        assert reposted.json()["id"] != seeded.hartree_fock.id
        assert chosen.status_code == 201
        assert chosen.json()["id"] != 999
        original = client.get(f"{API}/MethodFamilies/{seeded.hartree_fock.id}").json()
        assert original["name"] == "Hartree-Fock"

    def test_duplicate_name_and_keyword_returns_409(self, client, seeded):
        response = client.post(f"{API}/SpinStates", json={"name": "Doublet", "keyword": "D"})

        assert response.status_code == 409
        assert "already exists" in response.json()["detail"]

    def test_get_all_shapes(self, client, seeded):
        full = client.get(f"{API}/BaseMethods").json()
        simple = client.get(f"{API}/BaseMethods/Simple").json()
        intermediate = client.get(f"{API}/BaseMethods/Intermediate").json()
        records = client.get(f"{API}/BaseMethods/List").json()

        assert full[0]["method_family"]["name"] == "Hartree-Fock"
        assert simple[0]["method_family_id"] == seeded.hartree_fock.id
        assert intermediate[0]["method_family"] == {
            "id": seeded.hartree_fock.id,
            "name": "Hartree-Fock",
        }
        assert records == [{"id": seeded.hf.id, "keyword": "HF"}]

    def test_get_missing_returns_404(self, client):
        response = client.get(f"{API}/BaseMethods/999")

        assert response.status_code == 404
        assert response.json()["detail"] == (
            "No Base Method exists with the supplied Id 999."
        )

    def test_update(self, client, seeded):
        body = seeded.hf.to_simple_model().to_dict()
        body["keyword"] = "RHF"

        response = client.put(f"{API}/BaseMethods/{seeded.hf.id}", json=body)

        assert response.status_code == 200
        assert response.json()["keyword"] == "RHF"
        assert response.json()["method_family"]["id"] == seeded.hartree_fock.id

    def test_update_id_mismatch_returns_400(self, client, seeded):
        body = seeded.dft.to_dict()

        response = client.put(f"{API}/MethodFamilies/{seeded.dft.id + 100}", json=body)

        assert response.status_code == 400
        assert response.json()["detail"] == (
            f"The route parameter Id {seeded.dft.id + 100} does not match the "
            f"Model Id {seeded.dft.id} from the request body."
        )

    def test_update_missing_returns_404(self, client):
        response = client.put(
            f"{API}/MethodFamilies/999", json={"id": 999, "name": "Nope"}
        )

        assert response.status_code == 404

    def test_delete(self, client, seeded):
        response = client.delete(f"{API}/FullMethods/{seeded.uhf.id}")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert client.get(f"{API}/FullMethods").json() == []

    def test_delete_in_use_returns_409(self, client, seeded):
        response = client.delete(f"{API}/MethodFamilies/{seeded.hartree_fock.id}")

        assert response.status_code == 409
        assert "in use by one or more Base Methods" in response.json()["detail"]


class TestValidation:
    """Tests for request validation and error mapping."""

    def test_name_or_keyword_required(self, client):
        response = client.post(f"{API}/SpinStates", json={"description_text": "x"})

        assert response.status_code == 422

    def test_max_length(self, client):
        response = client.post(
            f"{API}/CalculationTypes", json={"name": "Optimization", "keyword": "x" * 31}
        )

        assert response.status_code == 422

    def test_missing_parent_returns_400(self, client):
        response = client.post(
            f"{API}/BaseMethods", json={"keyword": "B3LYP", "method_family_id": 999}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == (
            "The method_family with ID = 999 is null (does not exist)."
        )

    def test_unexpected_error_returns_500(self, client, storage, monkeypatch):
        def broken():
            raise RuntimeError("database is gone")

        monkeypatch.setattr(storage.method_families, "get_all_full", broken)

        response = client.get(f"{API}/MethodFamilies")

        assert response.status_code == 500
        assert response.json()["detail"] == "database is gone"


class TestLookups:
    """Tests for the relationship lookup routes."""

    def test_base_methods_by_family(self, client, seeded):
        response = client.get(
            f"{API}/BaseMethods/Family", params={"methodFamilyId": seeded.dft.id}
        )

        assert response.status_code == 200
        assert response.json() == []

    def test_combinations_without_method_family(self, client, seeded):
        client.post(
            f"{API}/ElectronicStatesMethodFamilies",
            json={"keyword": "TD", "electronic_state_id": seeded.ground.id},
        )

        response = client.get(f"{API}/ElectronicStatesMethodFamilies/MethodFamily")

        assert [item["keyword"] for item in response.json()] == ["TD"]

    def test_full_methods_by_parents(self, client, seeded):
        response = client.get(
            f"{API}/FullMethods/SpinStateElectronicStateMethodFamilyBaseMethod",
            params={
                "spinStateElectronicStateMethodFamilyId": seeded.unrestricted.id,
                "baseMethodId": seeded.hf.id,
            },
        )

        assert [item["keyword"] for item in response.json()] == ["UHF"]

    def test_leaf_collections_have_no_simple_route(self, client):
        response = client.get(f"{API}/MethodFamilies/Simple")

        assert response.status_code == 422
