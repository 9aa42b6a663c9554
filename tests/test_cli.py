"""Tests for the command line interface."""

import json
from unittest.mock import patch

import pytest
import sqlalchemy as sa
from click.testing import CliRunner

from gaussian_catalog.cli import cli


@pytest.fixture
def database_uri(tmp_path, monkeypatch):
    uri = f"sqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setenv("DATABASE_URI", uri)
    return uri


@pytest.fixture
def runner():
    return CliRunner()


def _create(runner, entity, data):
    result = runner.invoke(cli, ["create", entity, "--data", json.dumps(data), "--json"])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


def test_version(runner):
    result = runner.invoke(cli, ["version"])

    assert result.exit_code == 0
    assert "gaussian-catalog version 0.1.0" in result.output


class TestEntityCommands:
    """Tests for create, list, show and archive."""

    def test_create_and_list(self, runner, database_uri):
        family = _create(runner, "method_family", {"name": "Hartree-Fock"})
        method = _create(
            runner, "base_method", {"keyword": "HF", "method_family_id": family["id"]}
        )

        assert method["method_family"]["name"] == "Hartree-Fock"

        result = runner.invoke(cli, ["list", "base_method", "--shape", "records", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == [{"id": method["id"], "keyword": "HF"}]

        result = runner.invoke(cli, ["list", "base_method"])
        assert result.exit_code == 0
        assert "HF" in result.output

    def test_list_empty(self, runner, database_uri):
        result = runner.invoke(cli, ["list", "spin_state"])

        assert result.exit_code == 0
        assert "No spin_state entries found" in result.output

    def test_list_simple_shape_of_leaf_fails(self, runner, database_uri):
        result = runner.invoke(cli, ["list", "spin_state", "--shape", "simple"])

        assert result.exit_code == 1

    def test_show(self, runner, database_uri):
        state = _create(runner, "spin_state", {"name": "Doublet", "keyword": "D"})

        result = runner.invoke(cli, ["show", "spin_state", str(state["id"]), "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["keyword"] == "D"

        result = runner.invoke(cli, ["show", "spin_state", str(state["id"])])
        assert result.exit_code == 0
        assert "Doublet/D" in result.output

    def test_show_missing_fails(self, runner, database_uri):
        result = runner.invoke(cli, ["show", "full_method", "99"])

        assert result.exit_code == 1
        assert "No full_method exists with the supplied Id 99." in result.output

    def test_create_with_missing_parent_fails(self, runner, database_uri):
        result = runner.invoke(
            cli,
            ["create", "base_method", "--data", '{"keyword": "HF", "method_family_id": 5}'],
        )

        assert result.exit_code == 1
        assert "is null (does not exist)" in result.output

    def test_create_with_invalid_json_fails(self, runner, database_uri):
        result = runner.invoke(cli, ["create", "method_family", "--data", "{name"])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_create_without_required_relation_fails(self, runner, database_uri):
        result = runner.invoke(
            cli, ["create", "base_method", "--data", '{"keyword": "HF"}']
        )

        assert result.exit_code == 1
        assert "Invalid base_method" in result.output

    def test_archive(self, runner, database_uri):
        family = _create(runner, "method_family", {"name": "DFT"})

        result = runner.invoke(cli, ["archive", "method_family", str(family["id"])])
        assert result.exit_code == 0

        result = runner.invoke(cli, ["list", "method_family", "--json"])
        assert json.loads(result.stdout) == []

    def test_archive_in_use_fails(self, runner, database_uri):
        family = _create(runner, "method_family", {"name": "Hartree-Fock"})
        _create(runner, "base_method", {"keyword": "HF", "method_family_id": family["id"]})

        result = runner.invoke(cli, ["archive", "method_family", str(family["id"])])

        assert result.exit_code == 1
        assert "in use by one or more Base Methods" in result.output


class TestDatabaseCommands:
    """Tests for init-db and migrate."""

    def test_init_db_creates_and_stamps(self, runner, database_uri):
        result = runner.invoke(cli, ["init-db"])

        assert result.exit_code == 0, result.output
        engine = sa.create_engine(database_uri)
        try:
            tables = sa.inspect(engine).get_table_names()
            with engine.connect() as connection:
                version = connection.execute(
                    sa.text("SELECT version_num FROM alembic_version")
                ).scalar()
        finally:
            engine.dispose()

        assert "full_methods" in tables
        assert version == "3f1c9a7d2b40"

    def test_migrate_builds_schema(self, runner, database_uri):
        result = runner.invoke(cli, ["migrate"])

        assert result.exit_code == 0, result.output
        engine = sa.create_engine(database_uri)
        try:
            tables = set(sa.inspect(engine).get_table_names())
        finally:
            engine.dispose()

        assert {
            "method_families",
            "spin_states",
            "electronic_states",
            "calculation_types",
            "base_methods",
            "electronic_states_method_families",
            "spin_states_electronic_states_method_families",
            "full_methods",
        } <= tables


def test_serve_starts_uvicorn(runner):
    with patch("gaussian_catalog.api.server.start_server") as start_server:
        result = runner.invoke(cli, ["serve", "--host", "0.0.0.0", "--port", "9000"])

    assert result.exit_code == 0
    start_server.assert_called_once_with(host="0.0.0.0", port=9000, reload=False)
