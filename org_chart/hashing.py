"""
Org Chart — Canonical Hashing

Deterministic canonical serialization + SHA-256 hashing of a registry.

Rules:
  - Employees in registry order (insertion order modulo deletions)
  - Report ids in stored order; both orders are observable in print()
  - UTF-8 JSON, no whitespace
"""

from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING, Any, Dict, List

if TYPE_CHECKING:
    from .registry import OrgRegistry


def canonical_serialize(registry: "OrgRegistry") -> bytes:
    """
    Canonical serialization of a registry to UTF-8 JSON bytes.
    No whitespace. Deterministic field order.
    """
    obj = _build_canonical_dict(registry)
    return json.dumps(obj, ensure_ascii=True, separators=(",", ":"), sort_keys=False).encode("utf-8")


def canonical_hash(registry: "OrgRegistry") -> str:
    """SHA-256 of canonical serialization. Lowercase hex string."""
    return hashlib.sha256(canonical_serialize(registry)).hexdigest()


def _build_canonical_dict(registry: "OrgRegistry") -> Dict[str, Any]:
    employees: List[Dict[str, Any]] = [e.to_dict() for e in registry.employees]

    return {
        "chart_version": 1,
        "employees": employees,
    }
