# File: tests/conftest.py
from __future__ import annotations
import json
import shutil
import tempfile
from pathlib import Path
from typing import Dict

import pytest
from fastapi.testclient import TestClient

VALID_DESCRIPTOR = "ghcr.io/acleveland/foxy-fabrications-admin:v1.2.3,2025-01-15T22:30:45Z,abc123def456789"


def _mk_temp_tree(prefix: str = "foxy_tests") -> Dict[str, Path]:
    base = Path(tempfile.mkdtemp(prefix=prefix + "_"))
    static = base / "static"
    logs = base / "logs"
    static.mkdir(parents=True, exist_ok=True)
    logs.mkdir(parents=True, exist_ok=True)
    (static / "style.css").write_text("body { color: black; }\n", encoding="utf-8")
    (static / "script.js").write_text("console.log('ok');\n", encoding="utf-8")
    return {"base": base, "static": static, "logs": logs, "version_file": base / "version.txt"}


@pytest.fixture(scope="session")
def test_env() -> Dict[str, Path]:
    """Session sandbox so tests never touch real repo paths."""
    tree = _mk_temp_tree("foxy_tests")
    try:
        yield tree
    finally:
        shutil.rmtree(tree["base"], ignore_errors=True)


@pytest.fixture(scope="function")
def version_file(test_env):
    """Path of the descriptor file; removed after each test."""
    path = test_env["version_file"]
    path.unlink(missing_ok=True)
    try:
        yield path
    finally:
        path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def data_dir(tmp_path) -> Path:
    d = tmp_path / "data"
    d.mkdir()
    return d


@pytest.fixture(scope="function")
def uploads_dir(tmp_path) -> Path:
    d = tmp_path / "uploads"
    d.mkdir()
    return d


@pytest.fixture(scope="function")
def seed(data_dir):
    """Write a collection file the way the store lays it out."""
    def _seed(collection: str, docs):
        (data_dir / f"{collection}.json").write_text(json.dumps(docs), encoding="utf-8")
    return _seed


@pytest.fixture(scope="function")
def make_client(test_env, version_file, data_dir, uploads_dir, monkeypatch):
    """Factory for clients built after the env is patched."""
    monkeypatch.setenv("VERSION_FILE", str(version_file))
    monkeypatch.setenv("STATIC_DIR", str(test_env["static"]))
    monkeypatch.setenv("DATA_DIR", str(data_dir))
    monkeypatch.setenv("UPLOADS_DIR", str(uploads_dir))
    monkeypatch.setenv("ENVIRONMENT", "test")
    for k in ("PORT", "ADMIN_PORT", "SERVICE_NAME", "FALLBACK_IMAGE", "TEMPLATES_DIR"):
        monkeypatch.delenv(k, raising=False)

    def _make(descriptor: str | None = None, unset=(), **env: str) -> TestClient:
        if descriptor is not None:
            version_file.write_text(descriptor, encoding="utf-8")
        for k, v in env.items():
            monkeypatch.setenv(k, v)
        for k in unset:
            monkeypatch.delenv(k, raising=False)
        from foxy_admin.main import create_app
        return TestClient(create_app())

    return _make


@pytest.fixture(scope="function")
def test_client(make_client):
    return make_client(VALID_DESCRIPTOR)
