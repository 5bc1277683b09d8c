from __future__ import annotations

import json
from html.parser import HTMLParser
from pathlib import Path

import pytest

ENV_VARS = ("PUBLIC_URL", "GITHUB_ACTIONS", "CI", "GITHUB_REPOSITORY", "SITE_URL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def write_client(root: Path, name: str, config: dict | None = None, raw: str | None = None) -> Path:
    client_dir = root / "clients" / name
    client_dir.mkdir(parents=True, exist_ok=True)
    if raw is not None:
        (client_dir / "site.json").write_text(raw, encoding="utf-8")
    elif config is not None:
        (client_dir / "site.json").write_text(json.dumps(config), encoding="utf-8")
    return client_dir


def write_file(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


class TagBalance(HTMLParser):
    VOID = {"meta", "link", "br", "img", "input", "hr"}

    def __init__(self) -> None:
        super().__init__()
        self.stack: list[str] = []
        self.errors: list[str] = []
        self.hrefs: list[str] = []

    def handle_starttag(self, tag: str, attrs: list) -> None:
        if tag == "a":
            self.hrefs.extend(value for name, value in attrs if name == "href" and value)
        if tag not in self.VOID:
            self.stack.append(tag)

    def handle_startendtag(self, tag: str, attrs: list) -> None:
        # unquoted values such as href=/clients/x/ end in "/>" after minification
        self.handle_starttag(tag, attrs)

    def handle_endtag(self, tag: str) -> None:
        if not self.stack or self.stack.pop() != tag:
            self.errors.append(tag)


def check_html(html_text: str) -> TagBalance:
    checker = TagBalance()
    checker.feed(html_text)
    checker.close()
    return checker
