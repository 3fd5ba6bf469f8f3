"""JSON output wrapper for CLI commands.

Every structured response carries schema metadata (schema_id,
schema_version, producer, produced_at) so consumers can detect format
changes.
"""

from __future__ import annotations

import json
from typing import Any

from zkcat.guest import Commitment
from zkcat.utils.schema import build_schema_stamp


def json_response(
    schema_id: str,
    schema_version: int,
    **data: Any,
) -> str:
    """Create schema-wrapped JSON response for CLI output.

    Example:
        >>> json_response("proof_verified", 1, redacted_indices=[1])
        {
          "schema_id": "proof_verified",
          "schema_version": 1,
          "producer": "zkcat-0.1.0",
          "produced_at": "2026-01-12T10:30:00+00:00",
          "redacted_indices": [1]
        }
    """
    stamp = build_schema_stamp(schema_id=schema_id, schema_version=schema_version)
    wrapped = {
        "schema_id": stamp.schema_id,
        "schema_version": stamp.schema_version,
        "producer": stamp.producer,
        "produced_at": stamp.produced_at,
        **data,
    }
    return json.dumps(wrapped, indent=2, default=str)


def commitment_payload(commitment: Commitment) -> dict[str, Any]:
    """Public fields of ``commitment`` in JSON-friendly form."""
    return {
        "full_sha256": commitment.full_sha256,
        "redacted_sha256": commitment.redacted_sha256,
        "redacted_indices": list(commitment.indices),
    }
