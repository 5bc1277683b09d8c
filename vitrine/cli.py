from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from .builder import build_site
from .config import load_settings, parse_bool
from .env import BuildEnv
from .errors import VitrineError
from .paths import ProjectPaths
from .scaffold import add_client


def run_build(args: argparse.Namespace) -> int:
    root = Path(args.root)
    output = Path(args.output) if args.output else None
    paths = ProjectPaths.resolve(root, output)
    env = BuildEnv.from_environ()
    start = time.perf_counter()
    ctx = build_site(paths, env, minify=args.minify, nojekyll=args.nojekyll)
    elapsed = time.perf_counter() - start
    print(f"Build OK: clients={ctx.built_slugs} base_path={ctx.base_path}")
    print(f"Build completed in {elapsed:.2f}s.")
    print(f"Site generated in: {paths.output}")
    return 0


def run_add_client(args: argparse.Namespace) -> int:
    raw = " ".join(args.name).strip()
    if not raw:
        print('Usage: vitrine add-client <name-or-slug> [--title "Full Name"]', file=sys.stderr)
        return 1
    paths = ProjectPaths.resolve(Path(args.root))
    target = add_client(paths.clients, raw, args.title)
    slug = target.name
    print(f"Client created: clients/{slug}")
    print(f"  Edit clients/{slug}/site.json (contacts, artists, colours...).")
    print("  Then run: vitrine build")
    return 0


def build_parser(settings: dict, config_path: str) -> argparse.ArgumentParser:
    def cfg_str(key: str, default: str) -> str:
        value = settings.get(key)
        return default if value is None else str(value)

    def cfg_bool(key: str, default: bool) -> bool:
        value = settings.get(key)
        return default if value is None else parse_bool(value)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=argparse.SUPPRESS, help="Path to settings file (TOML/YAML/JSON).")

    parser = argparse.ArgumentParser(prog="vitrine", description="Static vitrine sites for several clients.")
    parser.add_argument("--config", default=config_path, help="Path to settings file (TOML/YAML/JSON).")
    sub = parser.add_subparsers(dest="command")

    build = sub.add_parser(
        "build", parents=[common], help="Build every enabled client into the output directory."
    )
    build.add_argument("--root", default=cfg_str("root", "."), help="Project root holding template/ and clients/.")
    build.add_argument("--output", default=cfg_str("output", ""), help="Output directory (default: dist).")
    build.add_argument(
        "--minify",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("minify", True),
        help="Minify generated HTML.",
    )
    build.add_argument(
        "--nojekyll",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("write_nojekyll", True),
        help="Write .nojekyll in the output directory.",
    )
    build.set_defaults(func=run_build)

    add = sub.add_parser("add-client", parents=[common], help="Scaffold a new client directory.")
    add.add_argument("name", nargs="*", help="Client name or slug (words are joined with spaces).")
    add.add_argument("--title", default=None, help="Display title for the client.")
    add.add_argument("--root", default=cfg_str("root", "."), help="Project root holding clients/.")
    add.set_defaults(func=run_add_client)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--config", default="vitrine.toml")
    pre_args, _ = pre_parser.parse_known_args(argv)
    try:
        settings = load_settings(Path(pre_args.config))
    except VitrineError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser = build_parser(settings, pre_args.config)
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_usage(sys.stderr)
        return 1
    try:
        return args.func(args)
    except VitrineError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
