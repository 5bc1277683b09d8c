from __future__ import annotations

import copy
import json
import re
import tomllib
import unicodedata
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ConfigError

SITE_FILE = "site.json"
NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
SPACES_RE = re.compile(r"\s+")

DEFAULT_PAGES = [
    {"path": "index", "title": "Accueil"},
    {"path": "contact", "title": "Contact"},
    {"path": "mentions", "title": "Mentions légales"},
]


def slugify(raw: str) -> str:
    text = unicodedata.normalize("NFD", str(raw or "").lower())
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    return NON_ALNUM_RE.sub("-", text).strip("-")


def display_name(name: str, title: Optional[str] = None) -> str:
    """Human name for a client, or "" when only a bare slug is known."""
    if title and title.strip():
        return SPACES_RE.sub(" ", title).strip()
    name = SPACES_RE.sub(" ", str(name or "")).strip()
    if not name or name == slugify(name):
        return ""
    return name


def default_config(slug: str, title: str = "") -> dict:
    email = f"contact@{slug}.fr"
    return {
        "build": True,
        "listed": True,
        "slug": slug,
        "title": title or f"{slug} – Site vitrine",
        "brand": title or slug.replace("-", " "),
        "description": f"Présentation de {title or slug}",
        "lang": "fr",
        "theme": {
            "brand": "#e11d48",
            "bg": "#0c0c0d",
            "panel": "#141416",
            "text": "#f3f3f3",
            "muted": "#a1a1aa",
        },
        "hero": {
            "heading": "Créations sur-mesure",
            "subheading": "Galerie, tarifs et contact en un clic.",
            "image": "assets/hero.webp",
        },
        "contact": {"email": email, "phone": "+33 6 00 00 00 00", "city": ""},
        "socials": {"instagram": "", "facebook": "", "tiktok": ""},
        "legal": {
            "editor": {
                "entity": title or slug,
                "representative": "",
                "status": "Entrepreneur individuel (Tatouage)",
                "siret": "",
                "email": email,
            },
            "provider": {
                "entity": "Les Sites de David – David Bairet",
                "siret": "",
                "email": "contact@lessitesdedavid.fr",
            },
            "host": {
                "provider": "GitHub Pages",
                "company": "GitHub, Inc.",
                "address": "88 Colin P Kelly Jr St, San Francisco, CA 94107, USA",
                "url": "https://pages.github.com/",
            },
        },
        "seo": {
            "keywords": ["tatouage", "fineline", "dotwork", "réalisme"],
            "ogImage": "assets/og.jpg",
            "geo": {"lat": 0, "lng": 0},
        },
        "sections": {"styles": True, "artists": True, "gallery": True, "contact": True},
        "styles": [
            {"name": "Fineline", "desc": "Lignes délicates, minimalisme élégant."},
            {"name": "Blackwork", "desc": "Noirs profonds, contrastes puissants."},
            {"name": "Réalisme", "desc": "Détails précis, effets photographiques."},
            {"name": "Neo-trad", "desc": "Couleurs vives, motifs iconiques."},
        ],
        "artists": [
            {
                "name": "Alex",
                "specialties": "Fineline • Blackwork",
                "image": "assets/img/artist-alex.jpg",
                "profile": "artist.html",
            },
            {
                "name": "Maya",
                "specialties": "Neo-trad • Couleur",
                "image": "assets/img/artist-maya.jpg",
                "profile": "artist.html",
            },
        ],
        "gallery": [
            "assets/img/tattoo1.jpg",
            "assets/img/tattoo2.jpg",
            "assets/img/tattoo3.jpg",
        ],
        "pages": copy.deepcopy(DEFAULT_PAGES),
    }


def deep_merge(defaults: Any, override: Any) -> Any:
    """Merge ``override`` onto ``defaults`` leaf by leaf.

    Mappings are merged key by key at every depth, so an explicit value only
    replaces the default of its own field. Any other value (scalars, lists)
    replaces the default wholesale. ``None`` counts as absent.
    """
    if override is None:
        return copy.deepcopy(defaults)
    if isinstance(defaults, dict) and isinstance(override, dict):
        merged = {}
        for key, value in defaults.items():
            merged[key] = deep_merge(value, override.get(key))
        for key, value in override.items():
            if key not in merged:
                merged[key] = copy.deepcopy(value)
        return merged
    return copy.deepcopy(override)


def merge_config(partial: Optional[dict], name: str, title: Optional[str] = None) -> dict:
    partial = partial or {}
    slug = slugify(name)
    merged = deep_merge(default_config(slug, display_name(name, title)), partial)
    merged["slug"] = slug
    if not merged.get("pages"):
        merged["pages"] = copy.deepcopy(DEFAULT_PAGES)
    return merged


def load_site_json(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"not valid UTF-8 ({exc})", path) from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON: {exc}", path) from exc
    if not isinstance(data, dict):
        raise ConfigError("site configuration must be a JSON object", path)
    return data


def write_site_json(path: Path, config: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def load_settings(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix == ".toml":
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML: {exc}", path) from exc
    elif suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"invalid YAML: {exc}", path) from exc
        if data is None:
            return {}
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"invalid JSON: {exc}", path) from exc
    if not isinstance(data, dict):
        raise ConfigError("settings must be a mapping", path)
    return data


def parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    return False
