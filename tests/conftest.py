from __future__ import annotations

import html

import pytest

from html_parser import DocPage, Settings, parse_html


class HtmlBuilder:
    """
    Build documentation pages in the heading-wrapper layout:

        <div class="content"><h1>Title</h1><p>lead</p> ...parts... </div>
    """

    def h(self, level: int, text: str) -> str:
        return (
            f'<div class="heading-wrapper" data-heading-level="h{level}">'
            f"<h{level}>{text}</h{level}></div>"
        )

    def p(self, text: str) -> str:
        return f"<p>{text}</p>"

    def ul(self, *items: str) -> str:
        return "<ul>" + "".join(f"<li>{item}</li>" for item in items) + "</ul>"

    def alert(self, severity: str, text: str, attrs: str = "") -> str:
        extra = f" {attrs}" if attrs else ""
        return f'<div class="alert is-{severity}"{extra}><p>{text}</p></div>'

    def pre(self, code: str) -> str:
        return f"<pre><code>{html.escape(code)}</code></pre>"

    def experimental(self, *parts: str) -> str:
        return '<div data-moniker="minecraft-bedrock-experimental">' + "".join(parts) + "</div>"

    def markup(self, *parts: str, title: str | None = "Widget", lead: str | None = "Does a thing.") -> str:
        head = f"<h1>{title}</h1>" if title is not None else ""
        intro = f"<p>{lead}</p>" if lead is not None else ""
        body = "\n".join(parts)
        return (
            "<html><head><title>Docs</title><script>var x = 1;</script></head><body>"
            f'<div class="content">{head}\n{intro}\n{body}\n</div>'
            "</body></html>"
        )

    def page(self, *parts: str, title: str | None = "Widget", lead: str | None = "Does a thing.") -> DocPage:
        return parse_html(self.markup(*parts, title=title, lead=lead), Settings())


@pytest.fixture
def doc() -> HtmlBuilder:
    return HtmlBuilder()
