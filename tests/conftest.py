import json

import pytest

SPEC = {
    "openapi": "3.0.0",
    "info": {"title": "Posts API", "version": "1.0.0"},
    "paths": {"/posts": {"get": {"responses": {"200": {"description": "OK"}}}}},
}

YAML_SPEC = b"""openapi: 3.0.0
info:
  title: Posts API
  version: 1.0.0
paths: {}
"""


@pytest.fixture
def json_spec(tmp_path):
    path = tmp_path / "swagger.json"
    # non-canonical spacing so verbatim serving is observable
    path.write_bytes(json.dumps(SPEC, indent=3).encode("utf-8") + b"\n")
    return path


@pytest.fixture
def yaml_spec(tmp_path):
    path = tmp_path / "openapi.yaml"
    path.write_bytes(YAML_SPEC)
    return path


@pytest.fixture
def in_tmp(tmp_path, monkeypatch):
    """Run with tmp_path as the working directory so relative file paths resolve"""
    monkeypatch.chdir(tmp_path)
    return tmp_path
