"""Cache validator (ETag) storage keyed by request fingerprint."""

from __future__ import annotations

import hashlib
import json
import logging
import os
import threading
import uuid
from abc import ABC, abstractmethod
from contextlib import suppress
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

log = logging.getLogger("basecamp_sdk.validators")


def _json_default(value: Any) -> Any:
    # Raw upload payloads are folded in by content digest.
    if isinstance(value, (bytes, bytearray, memoryview)):
        return {"__bytes_sha256__": hashlib.sha256(bytes(value)).hexdigest()}
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    return str(value)


def create_hash(
    method: str, path: str, params: Optional[Mapping[str, Any]] = None
) -> str:
    """Compute a stable fingerprint for request identity."""
    payload = {
        "method": method.upper(),
        "path": path,
        "params": dict(params) if params else {},
    }
    serialized = json.dumps(
        payload, sort_keys=True, separators=(",", ":"), default=_json_default
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()


class ValidatorStore(ABC):
    """
    Fingerprint -> validator mapping shared by every call of a client.
    Entries never expire; they are a hint for conditional requests only.
    """

    @abstractmethod
    def get(self, fingerprint: str) -> Optional[str]: ...

    @abstractmethod
    def put(self, fingerprint: str, validator: str) -> None: ...

    @staticmethod
    def create_hash(
        method: str, path: str, params: Optional[Mapping[str, Any]] = None
    ) -> str:
        return create_hash(method, path, params)


class InMemoryValidatorStore(ValidatorStore):
    def __init__(self) -> None:
        self._data: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, fingerprint: str) -> Optional[str]:
        with self._lock:
            return self._data.get(fingerprint)

    def put(self, fingerprint: str, validator: str) -> None:
        with self._lock:
            self._data[fingerprint] = validator

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


def _atomic_write_json(path: Path, value: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".tmp-{path.name}-{uuid.uuid4().hex}")
    try:
        payload = json.dumps(value, sort_keys=True, ensure_ascii=True, indent=2) + "\n"
        tmp_path.write_text(payload, encoding="utf-8")
        os.replace(tmp_path, path)
    except OSError:
        with suppress(FileNotFoundError):
            tmp_path.unlink()
        raise


class JsonFileValidatorStore(ValidatorStore):
    """
    Durable store backed by one JSON file.
    - Loaded lazily on first access.
    - Every put rewrites the file atomically (tmp file + os.replace).
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._data: Optional[Dict[str, str]] = None
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, str]:
        if self._data is None:
            self._data = self._read_file()
        return self._data

    def _read_file(self) -> Dict[str, str]:
        # A corrupt file only costs unconditional fetches; the next put rewrites it.
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(raw, dict):
                raise ValueError("top-level value is not a JSON object")
        except ValueError as exc:
            log.warning(
                "validator_file_unreadable",
                extra={"path": str(self.path), "error": str(exc)},
            )
            return {}
        return {str(k): str(v) for k, v in raw.items()}

    def get(self, fingerprint: str) -> Optional[str]:
        with self._lock:
            return self._load().get(fingerprint)

    def put(self, fingerprint: str, validator: str) -> None:
        with self._lock:
            data = self._load()
            data[fingerprint] = validator
            _atomic_write_json(self.path, data)


__all__ = [
    "ValidatorStore",
    "InMemoryValidatorStore",
    "JsonFileValidatorStore",
    "create_hash",
]
