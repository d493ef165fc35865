"""Request handler producing the JSON response envelope.

Success: ``200 {"subject": ..., "items": [...]}`` (plus ``debug`` on request).
Missing subject: ``400 {"error": "Missing q"}``, before any network activity.
Unexpected failure: ``500 {"error": message, "debug": {...}}``; the partial trace is
always attached.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .models import DebugTrace
from .pipeline import RumorPipeline
from .utils.logging import get_logger

logger = get_logger("rumors.handler")

_TRUTHY = {"1", "true", "yes"}


@dataclass(slots=True)
class Response:
    status_code: int
    body: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=lambda: {"Content-Type": "application/json"})

    def to_json(self) -> str:
        return json.dumps(self.body, ensure_ascii=False)


def handle_request(params: Mapping[str, Any], *, pipeline: Optional[RumorPipeline] = None) -> Response:
    raw = str(params.get("q") or params.get("subject") or "").strip()
    debug = str(params.get("debug") or "").strip().lower() in _TRUTHY
    if not raw:
        return Response(400, {"error": "Missing q"})

    trace = DebugTrace()
    try:
        pipeline = pipeline or RumorPipeline()
        query = pipeline.parse_query(raw, params.get("mode"))
        trace.record("slugs", *query.slugs)
        items = pipeline.run(query, trace)
    except Exception as exc:  # noqa: BLE001 - top-level request guard
        logger.exception("Rumor request failed for %r: %s", raw, exc)
        body: Dict[str, Any] = {"error": str(exc) or "Unknown error", "debug": trace.to_dict()}
        return Response(500, body)

    body = {"subject": raw, "items": [it.to_dict() for it in items]}
    if debug:
        body["debug"] = trace.to_dict()
    return Response(200, body)
