from typing import Any


def render_attrs(tag_attrs: dict[str, Any], extra_attrs: dict[str, Any] | None = None) -> str:
    """
    Render attributes for a generated tag.
    tag_attrs: What the tag always carries (rel/href, src).
    extra_attrs: Attributes supplied with the reference; they may override.
    True renders a bare attribute, False/None drop it, '"' is escaped.
    """
    attrs = {**tag_attrs, **(extra_attrs or {})}

    parts = []
    for name, value in attrs.items():
        if value is True:
            parts.append(f" {name}")
        elif value is not False and value is not None:
            quoted = str(value).replace('"', "&quot;")
            parts.append(f' {name}="{quoted}"')
    return "".join(parts)


def stylesheet_tag(url: str, attrs: tuple = ()) -> str:
    return f"<link{render_attrs({'rel': 'stylesheet', 'href': url}, dict(attrs))}>"


def script_tag(url: str, attrs: tuple = ()) -> str:
    return f"<script{render_attrs({'src': url}, dict(attrs))}></script>"


def inline_script_tag(js: str) -> str:
    return f"<script>{js}</script>"


def style_tag(css: str, media: str | None = None) -> str:
    """Inline style block; a media key wraps the CSS in an @media rule."""
    if media:
        return f"<style>@media {media}{{{css}}}</style>"
    return f"<style>{css}</style>"
