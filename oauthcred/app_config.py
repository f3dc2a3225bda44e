"""Runtime configuration held as a parsed JSON document."""

from __future__ import annotations

import json
from typing import Any

_DECODER = json.JSONDecoder()


class AppConfig:
    """Parsed application configuration with nested key lookup."""

    def __init__(self, data: Any) -> None:
        self.data = data

    @classmethod
    def from_text(cls, raw_data: str | bytes) -> "AppConfig":
        """Parse the first JSON value in ``raw_data``; trailing data is ignored.

        Raises ``ValueError`` when no complete JSON value can be read.
        """
        if isinstance(raw_data, (bytes, bytearray)):
            raw_data = bytes(raw_data).decode("utf-8")
        text = raw_data.lstrip()
        if not text:
            raise ValueError("configuration is empty")
        data, _ = _DECODER.raw_decode(text)
        return cls(data)

    def lookup(self, *args: str) -> Any:
        """Follow ``args`` as object keys from the root.

        Returns ``None`` as soon as a key is missing or a value on the way
        is not a JSON object.
        """
        node = self.data
        for name in args:
            if not isinstance(node, dict) or name not in node:
                return None
            node = node[name]
        return node


def load_config(raw_data: str | bytes) -> AppConfig:
    """Load the runtime configuration from its raw text."""
    return AppConfig.from_text(raw_data)