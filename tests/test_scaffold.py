from __future__ import annotations

import json
from pathlib import Path

import pytest
from conftest import write_file

from vitrine.config import DEFAULT_PAGES, merge_config
from vitrine.errors import ClientExistsError, ConfigError, VitrineError
from vitrine.scaffold import add_client


def load(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def test_add_client_without_starter(tmp_path: Path) -> None:
    clients = tmp_path / "clients"
    target = add_client(clients, "Ink & Co")

    assert target == clients / "ink-co"
    for rel in ("pages/index.html", "assets/styles.css", "assets/script.js", "assets/img/.keep",
                "assets/hero.webp", "assets/og.jpg"):
        assert (target / rel).is_file(), rel
    assert (target / "partials").is_dir()
    site = load(target / "site.json")
    assert site["slug"] == "ink-co"
    assert site["title"] == "Ink & Co"
    assert site["pages"] == DEFAULT_PAGES
    assert site == merge_config(site, "ink-co")


def test_add_client_with_title_and_starter(tmp_path: Path) -> None:
    clients = tmp_path / "clients"
    write_file(clients / "_starter" / "pages" / "contact.html", "starter contact")
    write_file(clients / "_starter" / "assets" / "hero.webp", "real hero")
    write_file(
        clients / "_starter" / "site.json",
        json.dumps({"slug": "starter", "title": "Starter", "theme": {"brand": "#111111"}, "lang": "en"}),
    )

    target = add_client(clients, "cafe reve", title="Café Rêve")

    assert target.name == "cafe-reve"
    assert (target / "pages" / "contact.html").read_text(encoding="utf-8") == "starter contact"
    assert (target / "assets" / "hero.webp").read_text(encoding="utf-8") == "real hero"
    assert (target / "assets" / "og.jpg").is_file()
    site = load(target / "site.json")
    assert site["slug"] == "cafe-reve"
    assert site["title"] == "Café Rêve"
    assert site["theme"]["brand"] == "#111111"
    assert site["theme"]["bg"] == "#0c0c0d"
    assert site["lang"] == "en"


def test_add_client_refuses_existing_directory(tmp_path: Path) -> None:
    clients = tmp_path / "clients"
    (clients / "ink-co").mkdir(parents=True)
    with pytest.raises(ClientExistsError):
        add_client(clients, "Ink Co")


def test_add_client_requires_usable_name(tmp_path: Path) -> None:
    with pytest.raises(VitrineError):
        add_client(tmp_path / "clients", "!!!")


def test_malformed_starter_leaves_nothing_behind(tmp_path: Path) -> None:
    clients = tmp_path / "clients"
    write_file(clients / "_starter" / "site.json", "{oops")
    with pytest.raises(ConfigError):
        add_client(clients, "Ink Co")
    assert not (clients / "ink-co").exists()
    write_file(clients / "_starter" / "site.json", "{}")
    assert add_client(clients, "Ink Co") == clients / "ink-co"
