# src/hover/render.py — v1
"""Markdown rendering of hover cards."""

from __future__ import annotations

from xlhover.core.models import HoverPayload


def render_markdown(payload: HoverPayload, image_width: int = 400) -> str:
    """Render a payload as the markdown shown in the hover card.

    Tag is always shown, empty when missing. Text, xpath and css only when
    the descriptor carries them.
    """
    parts = [
        f"![Element]({payload.image_uri}|width={image_width})\n\n",
        f"**Tag**: `{payload.tag or ''}`\n\n",
    ]
    if payload.text:
        parts.append(f"**Text**: {payload.text}\n\n")
    if payload.xpath:
        parts.append(f"**XPath**: ```\n{payload.xpath}\n```\n\n")
    if payload.css:
        parts.append(f"**CSS**: ```\n{payload.css}\n```\n")
    return "".join(parts)
