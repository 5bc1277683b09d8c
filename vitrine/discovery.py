from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import SITE_FILE, load_site_json, merge_config, parse_bool, slugify
from .errors import ConfigError

RESERVED_PREFIX = "_"


@dataclass(frozen=True)
class Client:
    slug: str
    config: dict
    source: Path


def client_dirs(clients_dir: Path) -> list[Path]:
    """Candidate client directories, sorted by name."""
    if not clients_dir.is_dir():
        return []
    dirs = [
        path
        for path in clients_dir.iterdir()
        if path.is_dir() and not path.name.startswith(RESERVED_PREFIX)
    ]
    return sorted(dirs, key=lambda p: p.name)


def load_client(client_dir: Path) -> Client | None:
    site_path = client_dir / SITE_FILE
    if not site_path.is_file():
        return None
    raw = load_site_json(site_path)
    if "build" in raw and raw["build"] is not None and not parse_bool(raw["build"]):
        return None
    slug = slugify(client_dir.name)
    if slug != client_dir.name:
        raise ConfigError(f"client directory name is not a valid slug (expected {slug!r})", site_path)
    declared = raw.get("slug")
    if declared and declared != slug:
        raise ConfigError(f"slug {declared!r} does not match directory name {slug!r}", site_path)
    return Client(slug=slug, config=merge_config(raw, client_dir.name), source=client_dir)


def discover_clients(clients_dir: Path) -> list[Client]:
    clients = []
    for client_dir in client_dirs(clients_dir):
        client = load_client(client_dir)
        if client is not None:
            clients.append(client)
    return clients
