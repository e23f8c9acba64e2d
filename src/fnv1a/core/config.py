from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from fnv1a.core.errors import InvalidConfiguration
from fnv1a.core.fnv_hash import DEFAULT_CHUNK_SIZE
from fnv1a.core.params import FnvParams, params_for


@dataclass
class AppConfig:
    width: int = 32
    output_format: str = "dec"  # dec | hex
    prime: int | None = None
    offset_basis: int | None = None
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def hash_params(self) -> FnvParams:
        return params_for(self.width, self.prime, self.offset_basis)


def parse_int(raw: Any, name: str) -> int | None:
    """Accept ints, decimal strings and 0x-prefixed hex strings."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip(), 0)
        except ValueError:
            pass
    raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}")


def load_config(path: Path) -> AppConfig:
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Create it with a JSON object, for example:\n"
            '  {"width": 32, "output_format": "hex"}\n'
        )
    try:
        raw: Dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidConfiguration(f"{path}: not valid JSON ({exc})") from exc
    if not isinstance(raw, dict):
        raise InvalidConfiguration(f"{path}: top level must be a JSON object")

    output_format = str(raw.get("output_format", "dec")).lower()
    if output_format not in ("dec", "hex"):
        raise InvalidConfiguration(f"output_format must be 'dec' or 'hex', got {output_format!r}")

    chunk_size = parse_int(raw.get("chunk_size", DEFAULT_CHUNK_SIZE), "chunk_size")
    if chunk_size is None or chunk_size <= 0:
        raise InvalidConfiguration(f"chunk_size must be positive, got {chunk_size!r}")

    width = parse_int(raw.get("width"), "width")
    config = AppConfig(
        width=32 if width is None else width,
        output_format=output_format,
        prime=parse_int(raw.get("prime"), "prime"),
        offset_basis=parse_int(raw.get("offset_basis"), "offset_basis"),
        chunk_size=chunk_size,
    )
    # Fail here rather than at first use.
    config.hash_params()
    return config
