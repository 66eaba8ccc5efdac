from __future__ import annotations

import hashlib
import json


def canonical_json_dumps(value: object, *, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(value, sort_keys=True, indent=2, ensure_ascii=False)
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def canonical_json_hash(value: object) -> str:
    payload = canonical_json_dumps(value, pretty=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


__all__ = ["canonical_json_dumps", "canonical_json_hash"]
