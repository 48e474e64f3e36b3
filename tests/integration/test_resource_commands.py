"""Integration tests for resource commands: list, show, apply, delete."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
import respx
from typer.testing import CliRunner

from meshctl.app import app

runner = CliRunner()

BASE = "http://cp:5681"
COMMON_OPTS = ["--url", BASE, "--token", "secret"]

ROUTE = {
    "type": "TrafficRoute",
    "mesh": "default",
    "name": "web",
    "sources": [{"match": {"service": "frontend"}}],
    "destinations": [{"match": {"service": "backend"}}],
}


@pytest.fixture(autouse=True)
def _isolated(isolated_config):
    """Keep every command away from the user's real config file."""


class TestResourceList:
    @respx.mock
    def test_list_table(self):
        respx.get(f"{BASE}/meshes/default/traffic-routes").mock(
            return_value=httpx.Response(200, json={"items": [ROUTE]})
        )
        result = runner.invoke(app, ["resource", "list", "traffic-routes", *COMMON_OPTS])
        assert result.exit_code == 0
        assert "web" in result.output
        assert "default" in result.output

    @respx.mock
    def test_list_json(self):
        respx.get(f"{BASE}/meshes/default/traffic-routes").mock(
            return_value=httpx.Response(200, json={"items": [ROUTE]})
        )
        result = runner.invoke(app, [
            "resource", "list", "traffic-routes", "-f", "json", *COMMON_OPTS,
        ])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["items"][0]["name"] == "web"
        assert data["items"][0]["sources"] == [{"match": {"service": "frontend"}}]

    @respx.mock
    def test_list_mesh_and_paging(self):
        route = respx.get(f"{BASE}/meshes/demo/fault-injections").mock(
            return_value=httpx.Response(200, json={"items": []})
        )
        result = runner.invoke(app, [
            "resource", "list", "fault-injections",
            "--mesh", "demo", "--size", "10", "--offset", "2", *COMMON_OPTS,
        ])
        assert result.exit_code == 0
        assert route.calls.last.request.url.query == b"size=10&offset=2"

    @respx.mock
    def test_list_global_kind(self):
        respx.get(f"{BASE}/meshes").mock(
            return_value=httpx.Response(200, json={"items": [
                {"type": "Mesh", "name": "prod", "mesh": "prod"},
            ]})
        )
        result = runner.invoke(app, ["resource", "list", "meshes", *COMMON_OPTS])
        assert result.exit_code == 0
        assert "prod" in result.output

    def test_list_unknown_collection(self):
        result = runner.invoke(app, ["resource", "list", "gateways", *COMMON_OPTS])
        assert result.exit_code == 6
        assert "unknown resource collection" in result.output

    def test_list_without_url(self):
        result = runner.invoke(app, ["resource", "list", "meshes"])
        assert result.exit_code == 6
        assert "No control plane URL configured" in result.output


class TestResourceShow:
    @respx.mock
    def test_show(self):
        route = respx.get(f"{BASE}/meshes/default/traffic-routes/web").mock(
            return_value=httpx.Response(200, json=ROUTE)
        )
        result = runner.invoke(app, [
            "resource", "show", "traffic-routes", "web", "-f", "json", *COMMON_OPTS,
        ])
        assert result.exit_code == 0
        assert json.loads(result.output)["destinations"] == [{"match": {"service": "backend"}}]
        assert route.calls.last.request.headers["Authorization"] == "Bearer secret"

    @respx.mock
    def test_show_global_kind(self):
        respx.get(f"{BASE}/meshes/prod").mock(
            return_value=httpx.Response(200, json={"type": "Mesh", "name": "prod", "mesh": "prod"})
        )
        result = runner.invoke(app, ["resource", "show", "meshes", "prod", *COMMON_OPTS])
        assert result.exit_code == 0
        assert "prod" in result.output

    @respx.mock
    def test_show_not_found(self):
        respx.get(f"{BASE}/meshes/default/traffic-routes/nope").mock(
            return_value=httpx.Response(404, text="")
        )
        result = runner.invoke(app, ["resource", "show", "traffic-routes", "nope", *COMMON_OPTS])
        assert result.exit_code == 4

    @respx.mock
    def test_show_api_error_lists_causes(self):
        respx.get(f"{BASE}/meshes/default/traffic-routes/web").mock(
            return_value=httpx.Response(400, json={
                "title": "Could not retrieve a resource",
                "details": "bad request",
                "causes": [{"field": "name", "message": "invalid"}],
            })
        )
        result = runner.invoke(app, ["resource", "show", "traffic-routes", "web", *COMMON_OPTS])
        assert result.exit_code == 7
        assert "Could not retrieve a resource (bad request)" in result.output
        assert "* name: invalid" in result.output

    @respx.mock
    def test_show_plain_http_error(self):
        respx.get(f"{BASE}/meshes/default/traffic-routes/web").mock(
            return_value=httpx.Response(500, text="boom")
        )
        result = runner.invoke(app, ["resource", "show", "traffic-routes", "web", *COMMON_OPTS])
        assert result.exit_code == 1
        assert "(500): boom" in result.output

    @respx.mock
    def test_show_connection_refused(self):
        respx.get(f"{BASE}/meshes/default/traffic-routes/web").mock(
            side_effect=httpx.ConnectError("connection refused")
        )
        result = runner.invoke(app, ["resource", "show", "traffic-routes", "web", *COMMON_OPTS])
        assert result.exit_code == 2
        assert "connection refused" in result.output


class TestResourceApply:
    @pytest.fixture
    def route_file(self, tmp_path: Path) -> Path:
        path = tmp_path / "route.yaml"
        path.write_text(
            "type: TrafficRoute\n"
            "mesh: default\n"
            "name: web\n"
            "sources:\n"
            "  - match:\n"
            "      service: frontend\n"
        )
        return path

    @respx.mock
    def test_apply_creates(self, route_file: Path):
        respx.get(f"{BASE}/meshes/default/traffic-routes/web").mock(
            return_value=httpx.Response(404)
        )
        put = respx.put(f"{BASE}/meshes/default/traffic-routes/web").mock(
            return_value=httpx.Response(201)
        )
        result = runner.invoke(app, ["resource", "apply", "-F", str(route_file), *COMMON_OPTS])
        assert result.exit_code == 0
        assert "TrafficRoute 'web' created." in result.output
        body = json.loads(put.calls.last.request.content)
        assert body == {
            "type": "TrafficRoute",
            "name": "web",
            "mesh": "default",
            "sources": [{"match": {"service": "frontend"}}],
        }

    @respx.mock
    def test_apply_updates(self, route_file: Path):
        respx.get(f"{BASE}/meshes/default/traffic-routes/web").mock(
            return_value=httpx.Response(200, json=ROUTE)
        )
        put = respx.put(f"{BASE}/meshes/default/traffic-routes/web").mock(
            return_value=httpx.Response(200)
        )
        result = runner.invoke(app, ["resource", "apply", "-F", str(route_file), *COMMON_OPTS])
        assert result.exit_code == 0
        assert "TrafficRoute 'web' updated." in result.output
        assert "destinations" not in json.loads(put.calls.last.request.content)

    @respx.mock
    def test_apply_name_and_mesh_override(self, route_file: Path):
        respx.get(f"{BASE}/meshes/demo/traffic-routes/api").mock(
            return_value=httpx.Response(404)
        )
        put = respx.put(f"{BASE}/meshes/demo/traffic-routes/api").mock(
            return_value=httpx.Response(201)
        )
        result = runner.invoke(app, [
            "resource", "apply", "-F", str(route_file),
            "--name", "api", "--mesh", "demo", *COMMON_OPTS,
        ])
        assert result.exit_code == 0
        body = json.loads(put.calls.last.request.content)
        assert body["name"] == "api"
        assert body["mesh"] == "demo"

    @respx.mock
    def test_apply_global_kind_defaults_mesh(self, tmp_path: Path):
        path = tmp_path / "mesh.json"
        path.write_text(json.dumps({"type": "Mesh", "name": "prod"}))
        respx.get(f"{BASE}/meshes/prod").mock(return_value=httpx.Response(404))
        put = respx.put(f"{BASE}/meshes/prod").mock(return_value=httpx.Response(201))
        result = runner.invoke(app, ["resource", "apply", "-F", str(path), *COMMON_OPTS])
        assert result.exit_code == 0
        assert json.loads(put.calls.last.request.content)["mesh"] == "prod"

    def test_apply_unknown_type(self, tmp_path: Path):
        path = tmp_path / "thing.yaml"
        path.write_text("type: Gateway\nname: edge\n")
        result = runner.invoke(app, ["resource", "apply", "-F", str(path), *COMMON_OPTS])
        assert result.exit_code == 6

    def test_apply_without_name(self, tmp_path: Path):
        path = tmp_path / "route.yaml"
        path.write_text("type: TrafficRoute\nmesh: default\n")
        result = runner.invoke(app, ["resource", "apply", "-F", str(path), *COMMON_OPTS])
        assert result.exit_code == 1
        assert "pass --name" in result.output

    def test_apply_not_an_object(self, tmp_path: Path):
        path = tmp_path / "route.yaml"
        path.write_text("- one\n- two\n")
        result = runner.invoke(app, ["resource", "apply", "-F", str(path), *COMMON_OPTS])
        assert result.exit_code == 1


class TestResourceDelete:
    @respx.mock
    def test_delete(self):
        route = respx.delete(f"{BASE}/meshes/demo/traffic-permissions/allow-all").mock(
            return_value=httpx.Response(200)
        )
        result = runner.invoke(app, [
            "resource", "delete", "traffic-permissions", "allow-all", "--mesh", "demo", *COMMON_OPTS,
        ])
        assert result.exit_code == 0
        assert route.called
        assert "TrafficPermission 'allow-all' deleted." in result.output

    @respx.mock
    def test_delete_not_found(self):
        respx.delete(f"{BASE}/meshes/default/traffic-routes/nope").mock(
            return_value=httpx.Response(404, json={"title": "Not found", "details": "missing"})
        )
        result = runner.invoke(app, ["resource", "delete", "traffic-routes", "nope", *COMMON_OPTS])
        assert result.exit_code == 4
