from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from .assets import stage_client_assets, stage_public, write_text
from .config import SITE_FILE
from .discovery import Client, discover_clients
from .env import BuildEnv, absolute_base_url, compute_base_path
from .minify import minify_html_text
from .pages import build_sitemap, client_url, hub_page, not_found_page
from .paths import ProjectPaths
from .render import Renderer, page_context, read_page_content
from .templates import normalize_pages, resolve_template
from .utils import check_output_dir, replace_dir, write_nojekyll


@dataclass
class BuildContext:
    paths: ProjectPaths
    env: BuildEnv
    base_path: str
    minify: bool = True
    clients: list[Client] = field(default_factory=list)
    built: list[Client] = field(default_factory=list)

    @property
    def built_slugs(self) -> list[str]:
        return [client.slug for client in self.built]


def staging_dir(output_dir: Path) -> Path:
    return output_dir.with_name(output_dir.name + ".tmp")


def write_html(path: Path, html_text: str, minify: bool) -> None:
    write_text(path, minify_html_text(html_text) if minify else html_text)


def build_client(ctx: BuildContext, renderer: Renderer, client: Client, output_dir: Path) -> int:
    out_dir = output_dir / client_url(client.slug)
    stage_client_assets(ctx.paths.template, client.source, out_dir)
    pages = normalize_pages(client.config["pages"], client.source / SITE_FILE)
    count = 0
    for page_info in pages:
        name = page_info["path"]
        template = resolve_template(name, ctx.paths.template, client.source)
        if template is None:
            print(f"  {client.slug}/{name}: no template found, using built-in page")
        context = page_context(
            client.config,
            page_info,
            ctx.base_path,
            client.slug,
            is_ci=ctx.env.ci,
            content=read_page_content(client.source, name),
            pages=pages,
        )
        html_text = renderer.render(template, context)
        write_html(out_dir / f"{name}.html", html_text, ctx.minify)
        count += 1
    return count


def finalize_pages(ctx: BuildContext, output_dir: Path) -> None:
    write_html(output_dir / "index.html", hub_page(ctx.built), ctx.minify)
    write_html(output_dir / "404.html", not_found_page(ctx.base_path), ctx.minify)
    base_url = absolute_base_url(ctx.env, ctx.base_path)
    write_text(output_dir / "sitemap.xml", build_sitemap(ctx.clients, base_url))


def build_site(
    paths: ProjectPaths,
    env: BuildEnv,
    minify: bool = True,
    nojekyll: bool = True,
) -> BuildContext:
    """Build every enabled client into ``paths.output``.

    The tree is rendered into a staging directory and only swapped into place
    once every client and the hub, 404 and sitemap pages were written. On any
    error the staging tree is discarded and the previous output is left as is.
    """
    ctx = BuildContext(paths=paths, env=env, base_path=compute_base_path(env), minify=minify)
    staging = staging_dir(paths.output)
    check_output_dir(paths.output, paths.root)
    check_output_dir(staging, paths.root)
    if staging.exists():
        shutil.rmtree(staging)
    staging.mkdir(parents=True)

    try:
        stage_public(paths.public, staging)
        ctx.clients = discover_clients(paths.clients)
        renderer = Renderer(paths.template)
        for client in ctx.clients:
            count = build_client(ctx, renderer, client, staging)
            ctx.built.append(client)
            print(f"Built {client.slug} ({count} page(s))")
        finalize_pages(ctx, staging)
        if nojekyll:
            write_nojekyll(staging)
    except BaseException:
        shutil.rmtree(staging, ignore_errors=True)
        raise

    replace_dir(staging, paths.output)
    return ctx
