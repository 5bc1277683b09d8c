from __future__ import annotations

import sys

import minify_html


def minify_html_text(html_text: str) -> str:
    try:
        return minify_html.minify(
            html_text,
            minify_css=True,
            minify_js=True,
            keep_closing_tags=True,
            keep_html_and_head_opening_tags=True,
        )
    except Exception as exc:
        print(f"Warning: HTML minification failed, writing unminified output: {exc}", file=sys.stderr)
        return html_text
