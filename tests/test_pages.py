from __future__ import annotations

import xml.etree.ElementTree as etree
from pathlib import Path

from vitrine.config import merge_config
from vitrine.discovery import Client
from vitrine.pages import build_sitemap, hub_page, not_found_page

SITEMAP_NS = "{http://www.sitemaps.org/schemas/sitemap/0.9}"


def make_client(slug: str, **overrides: object) -> Client:
    return Client(slug=slug, config=merge_config(dict(overrides), slug), source=Path("clients") / slug)


def test_hub_redirects_to_first_client() -> None:
    html_text = hub_page([make_client("beta", title="Beta"), make_client("alpha", title="Alpha")])
    assert 'content="0; url=clients/beta/"' in html_text
    assert '<a href="clients/alpha/">Alpha</a>' in html_text


def test_hub_lists_only_listed_clients() -> None:
    html_text = hub_page([make_client("beta", title="Beta"), make_client("hidden", title="Hidden", listed=False)])
    assert "Hidden" not in html_text
    assert "url=clients/beta/" in html_text


def test_hub_without_clients_is_placeholder() -> None:
    html_text = hub_page([])
    assert "Aucun client construit" in html_text
    assert "refresh" not in html_text


def test_not_found_links_back_to_base_path() -> None:
    assert '<a href="/studio-sites/">' in not_found_page("/studio-sites/")


def test_sitemap_has_three_entries_per_client() -> None:
    xml_text = build_sitemap([make_client("beta"), make_client("alpha")], "https://owner.github.io/repo/")
    root = etree.fromstring(xml_text.encode("utf-8"))
    locs = [loc.text for loc in root.iter(f"{SITEMAP_NS}loc")]
    assert locs == [
        "https://owner.github.io/repo/clients/beta/",
        "https://owner.github.io/repo/clients/beta/contact.html",
        "https://owner.github.io/repo/clients/beta/mentions.html",
        "https://owner.github.io/repo/clients/alpha/",
        "https://owner.github.io/repo/clients/alpha/contact.html",
        "https://owner.github.io/repo/clients/alpha/mentions.html",
    ]


def test_empty_sitemap_is_valid_xml() -> None:
    root = etree.fromstring(build_sitemap([], "https://example.com/").encode("utf-8"))
    assert list(root) == []


def test_hub_redirect_follows_discovery_order_even_when_unlisted() -> None:
    html_text = hub_page([make_client("hidden", title="Hidden", listed=False), make_client("beta", title="Beta")])
    assert "url=clients/hidden/" in html_text
    assert '<a href="clients/beta/">Beta</a>' in html_text
    assert ">Hidden<" not in html_text
