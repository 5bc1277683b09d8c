from __future__ import annotations

import html
from xml.sax.saxutils import escape as xml_escape

from .discovery import Client
from .utils import join_url

SITEMAP_PAGES = ("", "contact.html", "mentions.html")


def client_url(slug: str) -> str:
    return f"clients/{slug}/"


def hub_page(built: list[Client]) -> str:
    if not built:
        return no_clients_page()
    target = html.escape(client_url(built[0].slug))
    links = []
    for client in built:
        if not client.config.get("listed", True):
            continue
        title = html.escape(str(client.config.get("title") or client.slug))
        links.append(f'<li><a href="{html.escape(client_url(client.slug))}">{title}</a></li>')
    listing = f"<ul>{''.join(links)}</ul>" if links else ""
    return (
        "<!doctype html>\n"
        '<html lang="fr">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f'<meta http-equiv="refresh" content="0; url={target}">\n'
        "<title>Redirection…</title>\n"
        "</head>\n"
        "<body>\n"
        f'<p><a href="{target}">Aller au site</a></p>\n'
        f"{listing}\n"
        "</body>\n"
        "</html>\n"
    )


def no_clients_page() -> str:
    return (
        "<!doctype html>\n"
        '<html lang="fr">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        "<title>Aucun client</title>\n"
        "</head>\n"
        "<body>\n"
        '<main style="font-family:system-ui;padding:2rem">\n'
        "<h1>Aucun client construit</h1>\n"
        "<p>Ajoute un dossier dans <code>clients/</code> avec un <code>site.json</code> "
        'et <code>"build": true</code>.</p>\n'
        "</main>\n"
        "</body>\n"
        "</html>\n"
    )


def not_found_page(base_path: str) -> str:
    home = html.escape(base_path or "/")
    return (
        "<!doctype html>\n"
        '<html lang="fr">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        "<title>Page introuvable</title>\n"
        "</head>\n"
        "<body>\n"
        '<main style="font-family:system-ui;padding:2rem">\n'
        "<h1>Oups, page introuvable</h1>\n"
        f'<p><a href="{home}">← Retour à l’accueil</a></p>\n'
        "</main>\n"
        "</body>\n"
        "</html>\n"
    )


def build_sitemap(clients: list[Client], base_url: str) -> str:
    items = []
    for client in clients:
        for page in SITEMAP_PAGES:
            url = join_url(base_url, client_url(client.slug) + page)
            items.append("\n".join(["<url>", f"<loc>{xml_escape(url)}</loc>", "</url>"]))
    return "\n".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
            "\n".join(items),
            "</urlset>",
            "",
        ]
    )
