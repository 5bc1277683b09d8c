from __future__ import annotations

import datetime as dt
import html
from pathlib import Path
from typing import Optional

import jinja2
import markdown
from markupsafe import Markup

from .errors import TemplateError
from .templates import normalize_pages

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]


def markdown_to_html(text: str) -> str:
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS)
    return md.convert(text or "")


def markdown_filter(text: str) -> Markup:
    return Markup(markdown_to_html(text))


def page_context(
    site: dict,
    page: dict,
    base_path: str,
    slug: str,
    is_ci: bool = False,
    content: str = "",
    pages: Optional[list] = None,
) -> dict:
    if pages is None:
        pages = normalize_pages(site.get("pages", []))
    return {
        "site": site,
        "page": page,
        "pages": pages,
        "basePath": base_path,
        "slug": slug,
        "clientOutDir": f"clients/{slug}/",
        "isCI": is_ci,
        "year": dt.date.today().year,
        "content": Markup(content),
    }


def read_page_content(client_dir: Path, page: str) -> str:
    path = client_dir / "content" / f"{page}.md"
    if not path.is_file():
        return ""
    return markdown_to_html(path.read_text(encoding="utf-8"))


def fallback_page(site: dict, page: dict, lang: str = "fr") -> str:
    site_title = html.escape(str(site.get("title") or "Site"))
    page_title = html.escape(str(page.get("title") or page.get("path") or ""))
    lang = html.escape(str(site.get("lang") or lang))
    return (
        "<!doctype html>\n"
        f'<html lang="{lang}">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{page_title} | {site_title}</title>\n"
        "</head>\n"
        "<body>\n"
        '<main style="font-family:system-ui;padding:2rem;color:#eee;background:#111">\n'
        f"<h1>{site_title}</h1>\n"
        f"<h2>{page_title}</h2>\n"
        "<p>Page générée avec le gabarit par défaut.</p>\n"
        "</main>\n"
        "</body>\n"
        "</html>\n"
    )


class Renderer:
    """Renders page templates with includes resolved beside the template, then in the shared root."""

    def __init__(self, template_root: Path) -> None:
        self.template_root = template_root
        self._envs: dict[Path, jinja2.Environment] = {}

    def environment(self, template_dir: Path) -> jinja2.Environment:
        env = self._envs.get(template_dir)
        if env is not None:
            return env
        search = [str(template_dir)]
        if template_dir != self.template_root:
            search.append(str(self.template_root))
        env = jinja2.Environment(
            loader=jinja2.ChoiceLoader([jinja2.FileSystemLoader(path) for path in search]),
            autoescape=jinja2.select_autoescape(["html", "xml"]),
            keep_trailing_newline=True,
        )
        env.filters["markdown"] = markdown_filter
        self._envs[template_dir] = env
        return env

    def render(self, template: Optional[Path], context: dict) -> str:
        if template is None:
            return fallback_page(context.get("site", {}), context.get("page", {}))
        client = str(context.get("slug", ""))
        env = self.environment(template.parent)
        try:
            return env.get_template(template.name).render(context)
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateError(f"syntax error line {exc.lineno}: {exc.message}", template, client) from exc
        except jinja2.TemplateNotFound as exc:
            raise TemplateError(f"missing template or partial {exc.name!r}", template, client) from exc
        except jinja2.TemplateError as exc:
            raise TemplateError(str(exc), template, client) from exc
