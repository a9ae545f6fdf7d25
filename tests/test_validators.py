import json
import logging
import threading

import pytest
import respx
from basecamp_sdk.core.client import BasecampClient
from basecamp_sdk.core.validators import (
    InMemoryValidatorStore,
    JsonFileValidatorStore,
    ValidatorStore,
    create_hash,
)
from httpx import Response


def test_create_hash_is_deterministic():
    params = {"subject": "Hello", "content": "World"}
    first = create_hash("POST", "projects/1/messages.json", params)
    second = create_hash("POST", "projects/1/messages.json", dict(params))
    assert first == second
    assert len(first) == 64


def test_create_hash_ignores_key_order_and_method_case():
    a = create_hash("get", "projects.json", {"a": 1, "b": 2})
    b = create_hash("GET", "projects.json", {"b": 2, "a": 1})
    assert a == b


def test_create_hash_changes_with_params():
    base = create_hash("PUT", "projects/1.json", {"name": "Alpha"})
    assert base != create_hash("PUT", "projects/1.json", {"name": "Beta"})
    assert base != create_hash("PUT", "projects/1.json", {"name": "Alpha", "x": 1})
    assert base != create_hash("PUT", "projects/1.json", None)


def test_create_hash_uses_method_and_path():
    assert create_hash("GET", "projects/1.json") != create_hash(
        "DELETE", "projects/1.json"
    )
    assert create_hash("GET", "projects/1.json") != create_hash(
        "GET", "projects/2.json"
    )


def test_create_hash_empty_params_equivalent():
    assert create_hash("GET", "people.json", None) == create_hash(
        "GET", "people.json", {}
    )


def test_create_hash_binary_params_by_content():
    a = create_hash("POST", "attachments.json", {"binary": b"one"})
    b = create_hash("POST", "attachments.json", {"binary": b"one"})
    c = create_hash("POST", "attachments.json", {"binary": b"two"})
    assert a == b
    assert a != c


def test_store_exposes_create_hash():
    assert ValidatorStore.create_hash("GET", "x.json", {}) == create_hash(
        "GET", "x.json", {}
    )
    assert InMemoryValidatorStore().create_hash("GET", "x.json") == create_hash(
        "GET", "x.json"
    )


def test_in_memory_get_put_overwrite():
    store = InMemoryValidatorStore()
    assert store.get("fp") is None

    store.put("fp", "abc123")
    assert store.get("fp") == "abc123"

    store.put("fp", "def456")
    assert store.get("fp") == "def456"
    assert len(store) == 1


def test_in_memory_concurrent_puts_are_not_lost():
    store = InMemoryValidatorStore()

    def writer(start: int) -> None:
        for i in range(start, start + 200):
            store.put(f"fp-{i}", f"etag-{i}")

    threads = [threading.Thread(target=writer, args=(n * 200,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 1600
    assert store.get("fp-1599") == "etag-1599"


def test_json_file_store_persists_between_instances(tmp_path):
    path = tmp_path / "cache" / "etags.json"
    store = JsonFileValidatorStore(path)
    assert store.get("fp") is None

    store.put("fp", "abc123")
    assert json.loads(path.read_text()) == {"fp": "abc123"}

    reopened = JsonFileValidatorStore(path)
    assert reopened.get("fp") == "abc123"

    reopened.put("fp", "zzz")
    assert JsonFileValidatorStore(path).get("fp") == "zzz"
    # no temp files left behind
    assert [p.name for p in path.parent.iterdir()] == ["etags.json"]


@pytest.mark.parametrize("content", ['{"abc": "x"', "[1, 2]", ""])
def test_json_file_store_corrupt_file_reads_empty(tmp_path, caplog, content):
    path = tmp_path / "etags.json"
    path.write_text(content)
    store = JsonFileValidatorStore(path)

    with caplog.at_level(logging.WARNING, logger="basecamp_sdk.validators"):
        assert store.get("abc") is None

    assert any(r.getMessage() == "validator_file_unreadable" for r in caplog.records)

    store.put("fp", "abc123")
    assert json.loads(path.read_text()) == {"fp": "abc123"}


@pytest.mark.asyncio
@respx.mock
async def test_corrupt_validator_file_does_not_block_requests(tmp_path):
    path = tmp_path / "etags.json"
    path.write_text('{"abc": "x"')
    client = BasecampClient(
        {"accountId": "999", "appName": "TestApp"},
        store=JsonFileValidatorStore(path),
    )
    route = respx.get("https://basecamp.com/999/api/v1/projects.json").mock(
        return_value=Response(200, json=[], headers={"ETag": '"fresh"'})
    )

    async with client:
        assert await client.get("projects.json") == []

    assert "If-None-Match" not in route.calls[0].request.headers
    fp = create_hash("GET", "projects.json", None)
    assert JsonFileValidatorStore(path).get(fp) == "fresh"
