"""Utilities for turning upstream HTTP response bodies into tool output text.

Provides `format_response_text` to handle:
- A JSON object body, re-emitted with two-space indentation
- Anything else (arrays, scalars, HTML error pages, plain text), returned verbatim

This lives in utils so every tool formats responses the same way.
"""
from __future__ import annotations

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def parse_json_object(text: str) -> dict[str, Any] | None:
    """Return the body as a dict when it is a JSON object, else None."""
    try:
        data = json.loads(text)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def format_response_text(text: str) -> str:
    """Pretty-print a JSON object body; fall back to the raw text for any other body."""
    data = parse_json_object(text)
    if data is None:
        logger.debug("Response body is not a JSON object; returning raw text (%d chars)", len(text))
        return text
    return json.dumps(data, indent=2, ensure_ascii=False)
