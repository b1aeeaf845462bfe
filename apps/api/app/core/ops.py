"""Operational safety helpers for config validation."""

from __future__ import annotations

from apps.api.app.core.config import Settings


def validate_runtime_configuration(settings: Settings) -> None:
    if settings.max_upload_bytes < 0:
        raise ValueError("Invalid runtime configuration: max upload bytes must be >= 0")

    extensions = settings.extension_list()
    if not extensions:
        raise ValueError("Invalid runtime configuration: at least one accepted extension required")
    malformed = [item for item in extensions if not item.startswith(".") or len(item) < 2]
    if malformed:
        raise ValueError(
            "Invalid runtime configuration: extensions must start with '.': "
            + ",".join(malformed)
        )
