from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from jsonschema import validate

from colorlevel._meta import __version__
from colorlevel.core.config import get_schema

if TYPE_CHECKING:
    from collections.abc import Sequence

    from colorlevel.report import StreamReport


def build_payload(reports: Sequence[StreamReport]) -> dict[str, Any]:
    return {
        "version": __version__,
        "streams": [report.to_dict() for report in reports],
    }


def render_json(reports: Sequence[StreamReport], *, indent: int | None = 2) -> str:
    """Serialise *reports*; raises ``jsonschema.ValidationError`` if the payload drifts from the schema."""
    payload = build_payload(reports)
    validate(payload, get_schema("v1"))
    return json.dumps(payload, indent=indent, sort_keys=True)


__all__ = ["build_payload", "render_json"]
