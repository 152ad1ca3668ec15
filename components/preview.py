"""HTML rendering of value previews.

Every piece of user text is escaped before it is placed into markup.
"""

from __future__ import annotations

import html

import streamlit as st

from core.value_types import PreviewFragment, PreviewKind

_PREVIEW_CLASS = "settings-preview"


def _link(fragment: PreviewFragment) -> str:
    text = html.escape(fragment.text)
    if not fragment.href:
        return f"<span>{text}</span>"
    href = html.escape(fragment.href, quote=True)
    return f"<a href='{href}' target='_blank' rel='noopener noreferrer'>{text}</a>"


def _swatch(fragment: PreviewFragment) -> str:
    text = html.escape(fragment.text)
    if fragment.color is None:
        return f"<code>{text}</code>"
    color = html.escape(fragment.color, quote=True)
    return (
        "<span style='display:inline-block;width:1.25rem;height:1.25rem;"
        f"border-radius:0.25rem;border:1px solid #ccc;background:{color};"
        f"vertical-align:middle;margin-right:0.4rem'></span><code>{text}</code>"
    )


def _badge(fragment: PreviewFragment) -> str:
    background = "#198754" if fragment.active else "#6c757d"
    return (
        f"<span style='background:{background};color:#fff;border-radius:999px;"
        f"padding:0.15rem 0.6rem;font-size:0.85rem'>{html.escape(fragment.text)}</span>"
    )


def _chips(fragment: PreviewFragment) -> str:
    chips = "".join(
        "<span style='display:inline-block;background:#e9ecef;border-radius:999px;"
        f"padding:0.1rem 0.55rem;margin:0 0.3rem 0.3rem 0'>{html.escape(item)}</span>"
        for item in fragment.items
    )
    return f"<div>{chips}</div>"


def preview_html(fragment: PreviewFragment) -> str:
    """Return escaped HTML for ``fragment``."""

    if fragment.kind is PreviewKind.BOOLEAN_BADGE:
        body = _badge(fragment)
    elif fragment.kind is PreviewKind.COLOR_SWATCH:
        body = _swatch(fragment)
    elif fragment.kind is PreviewKind.LINK:
        body = _link(fragment)
    elif fragment.kind is PreviewKind.CHIPS:
        body = _chips(fragment)
    elif fragment.kind is PreviewKind.JSON_BLOCK:
        body = f"<pre><code>{html.escape(fragment.text)}</code></pre>"
    elif fragment.kind is PreviewKind.INVALID:
        body = f"<span style='color:#dc3545'>{html.escape(fragment.text)}</span>"
    elif fragment.kind is PreviewKind.TEXT_BLOCK:
        body = "<br>".join(html.escape(line) for line in fragment.items)
    else:
        body = f"<span>{html.escape(fragment.text)}</span>"
    return f"<div class='{_PREVIEW_CLASS} {_PREVIEW_CLASS}--{fragment.kind.value}'>{body}</div>"


def render_value_preview(fragment: PreviewFragment | None) -> None:
    """Render the preview below the value widget; nothing for an empty value."""

    if fragment is None:
        return
    st.markdown(preview_html(fragment), unsafe_allow_html=True)


__all__ = ["preview_html", "render_value_preview"]
