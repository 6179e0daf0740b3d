"""Default document layout for reduced page content."""
import html
from typing import Callable

from starlette.responses import HTMLResponse

from pywidget.exceptions import WidgetRenderError
from pywidget.widget.reduce import PageContent

Layout = Callable[[PageContent], str]


def default_layout(content: PageContent, lang: str = "en") -> str:
    """Wrap page content in a minimal HTML5 document."""
    title = f"<title>{html.escape(content.title)}</title>" if content.title else ""
    return (
        "<!DOCTYPE html>\n"
        f'<html lang="{html.escape(lang, quote=True)}">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"{title}{content.head}\n"
        "</head>\n"
        f"<body>{content.body}</body>\n"
        "</html>\n"
    )


def render_page(
    content: PageContent,
    layout: Layout = default_layout,
    status_code: int = 200,
) -> HTMLResponse:
    """Render page content through a layout into an HTML response."""
    document = layout(content)
    if not isinstance(document, str):
        raise WidgetRenderError(
            f"Layout {getattr(layout, '__name__', layout)!r} returned "
            f"{type(document).__name__}, expected str"
        )
    return HTMLResponse(document, status_code=status_code)
