from __future__ import annotations

import minify_html

from vitrine.minify import minify_html_text


def test_minify_shrinks_whitespace() -> None:
    source = "<!doctype html>\n<html>\n  <body>\n    <!-- note -->\n    <p>Bonjour</p>\n  </body>\n</html>\n"
    result = minify_html_text(source)
    assert "Bonjour" in result
    assert "note" not in result
    assert len(result) < len(source)


def test_minify_failure_passes_input_through(monkeypatch, capsys) -> None:
    def boom(*args, **kwargs):
        raise RuntimeError("parser exploded")

    monkeypatch.setattr(minify_html, "minify", boom)
    assert minify_html_text("<p>raw</p>") == "<p>raw</p>"
    assert "parser exploded" in capsys.readouterr().err
