from __future__ import annotations

import json
from typing import Any


class JsonPayloadCodec:
    """Encodes document payloads as compact UTF-8 JSON."""

    def __init__(self, *, sort_keys: bool = False) -> None:
        self._sort_keys = sort_keys

    def encode(self, value: Any) -> bytes:
        return json.dumps(value, separators=(",", ":"), sort_keys=self._sort_keys).encode("utf-8")

    def decode(self, raw: bytes) -> Any:
        return json.loads(raw.decode("utf-8"))
