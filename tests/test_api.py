import pytest
from fastapi.testclient import TestClient

from api import app
from goapi import resolve


@pytest.fixture
def client():
	return TestClient(app)


def test_exports_plain_text(tmp_path, write_go, monkeypatch, client):
	write_go("ring.go", "package ring\n\ntype Ring[T any] struct{}\n\nfunc New[T any](n int) *Ring[T] { return nil }\n")
	monkeypatch.setattr(resolve, "find_package_dir", lambda path, cwd, go: str(tmp_path / "pkg"))
	resp = client.get("/exports", params={"path": "example.com/ring"})
	assert resp.status_code == 200
	assert resp.headers["content-type"].startswith("text/plain")
	assert resp.text == "// ring.go:\ntype Ring struct{}\nfunc New[T any](n int) *Ring[T]\n\n"


def test_exports_not_found(tmp_path, monkeypatch, client):
	monkeypatch.setattr(resolve, "find_package_dir", lambda path, cwd, go: None)
	monkeypatch.setenv("GOMODCACHE", str(tmp_path))
	resp = client.get("/exports", params={"path": "nowhere/pkg"})
	assert resp.status_code == 404
