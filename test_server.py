"""
HTTP service tests.

Usage:
    pytest test_server.py
"""
import pytest
from fastapi.testclient import TestClient

from server import app


@pytest.fixture
def client():
    return TestClient(app)


def test_welcome(client):
    r = client.get("/")
    assert r.status_code == 200
    body = r.json()
    assert body["default_range"] == "upper"
    assert "vigenere-encrypt" in body["operations"]


def test_ranges(client):
    r = client.get("/api/ranges")
    assert r.status_code == 200
    by_name = {item["name"]: item for item in r.json()}
    assert by_name["upper"] == {"name": "upper", "low": "A", "high": "Z", "size": 26}
    assert by_name["printable"]["size"] == 95


def test_caesar_default_range(client):
    r = client.post("/api/caesar-encrypt", json={"key": 3, "text": "HELLO, WORLD!"})
    assert r.status_code == 200
    assert r.json() == {"operation": "caesar-encrypt", "range_low": "A",
                        "range_high": "Z", "text": "KHOOR, ZRUOG!"}


def test_caesar_string_key(client):
    r = client.post("/api/caesar-decrypt", json={"key": "3", "text": "KHOORZRUOG"})
    assert r.status_code == 200
    assert r.json()["text"] == "HELLOWORLD"


def test_vigenere_round_trip_with_preset(client):
    r = client.post("/api/vigenere-encrypt",
                    json={"key": "s3cr3t", "text": "Hello, World!", "range": "printable"})
    assert r.status_code == 200
    enc = r.json()["text"]
    r = client.post("/api/vigenere-decrypt",
                    json={"key": "s3cr3t", "text": enc, "range": "printable"})
    assert r.json()["text"] == "Hello, World!"


def test_explicit_bounds(client):
    r = client.post("/api/caesar-encrypt",
                    json={"key": 1, "text": "abz", "range_low": "a", "range_high": "z"})
    assert r.status_code == 200
    assert r.json()["text"] == "bca"


def test_unknown_operation(client):
    r = client.post("/api/rot13", json={"key": 3, "text": "HELLO"})
    assert r.status_code == 404


@pytest.mark.parametrize("payload", [
    {"key": "3x", "text": "HELLO"},
    {"key": 3, "text": "HELLO", "range": "greek"},
    {"key": 3, "text": "HELLO", "range_low": "Z", "range_high": "A"},
    {"key": 3, "text": "HELLO", "range_low": "A"},
])
def test_caesar_bad_requests(client, payload):
    r = client.post("/api/caesar-encrypt", json=payload)
    assert r.status_code == 400


def test_vigenere_bad_keys(client):
    assert client.post("/api/vigenere-encrypt", json={"key": "", "text": "HI"}).status_code == 400
    assert client.post("/api/vigenere-encrypt", json={"key": 5, "text": "HI"}).status_code == 400
