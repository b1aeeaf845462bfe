"""Structured logging helpers for comparison events."""

from __future__ import annotations

import json
import logging
from typing import Any

_audit_logger = logging.getLogger("geojson_compare.audit")


def log_structured_event(event_type: str, **fields: Any) -> str:
    payload = {"event_type": event_type, **fields}
    serialized = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    _audit_logger.info(serialized)
    return serialized
