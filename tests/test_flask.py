import pytest
from flask import Flask, jsonify

from swagger_middleware import Config, SwaggerConfigError
from swagger_middleware.flask_ext import init_app


def make_app(config):
    app = Flask(__name__)
    app.config["calls"] = []

    @app.route("/", defaults={"path": ""})
    @app.route("/<path:path>")
    def catch_all(path):
        app.config["calls"].append("/" + path)
        return jsonify({"path": "/" + path})

    init_app(app, config)
    return app


def test_serves_spec(in_tmp, yaml_spec):
    app = make_app(Config(base_path="/api", file_path="./openapi.yaml"))

    response = app.test_client().get("/api/openapi.yaml")

    assert response.status_code == 200
    assert response.data == yaml_spec.read_bytes()
    assert response.headers["Content-Type"] == "application/yaml"
    assert app.config["calls"] == []


def test_serves_ui(in_tmp, json_spec):
    app = make_app(Config(base_path="/api", title="Posts API"))

    response = app.test_client().get("/api/docs")

    assert response.status_code == 200
    assert response.mimetype == "text/html"
    assert b"/api/swagger.json" in response.data
    assert b"Posts API" in response.data
    assert app.config["calls"] == []


def test_other_paths_pass_through(in_tmp, json_spec):
    app = make_app(Config(base_path="/api"))
    client = app.test_client()

    assert client.get("/v2/api/docs").get_json() == {"path": "/v2/api/docs"}
    assert client.get("/docs").get_json() == {"path": "/docs"}
    assert app.config["calls"] == ["/v2/api/docs", "/docs"]


def test_skip_predicate(in_tmp, json_spec):
    app = make_app(Config(next=lambda request: request.args.get("raw") == "1"))
    client = app.test_client()

    assert client.get("/docs?raw=1").get_json() == {"path": "/docs"}
    assert client.get("/docs").mimetype == "text/html"


def test_init_app_fails_on_missing_file(in_tmp):
    with pytest.raises(SwaggerConfigError):
        init_app(Flask(__name__), Config(file_path="./missing.json"))
