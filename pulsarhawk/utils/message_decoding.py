"""Best-effort decoding of message bodies for display and filtering."""

from __future__ import annotations

import json
from contextlib import suppress

from pulsarhawk.constants.values import UNDECODABLE_BODY_PLACEHOLDER


def body_text(body: bytes) -> str | None:
    """Return the body as UTF-8 text, or None when it is not valid UTF-8."""
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        return None


def pretty_body(body: bytes) -> str:
    """Render a body for the preview panel.

    JSON bodies are pretty-printed, other UTF-8 bodies are shown verbatim and
    anything else becomes a placeholder. Never raises.
    """
    text = body_text(body)
    if text is None:
        return UNDECODABLE_BODY_PLACEHOLDER
    with suppress(ValueError):
        return json.dumps(json.loads(text), indent=2, ensure_ascii=False)
    return text


def body_preview_line(body: bytes, width: int = 120) -> str:
    """Return a single-line summary of the body for list rows."""
    text = body_text(body)
    if text is None:
        return UNDECODABLE_BODY_PLACEHOLDER
    line = " ".join(text.split())
    if len(line) > width:
        return line[: width - 1] + "…"
    return line
