"""Reduction of a widget into final page content."""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pywidget.widget.accumulator import Widget
from pywidget.widget.contributions import (
    BodyMarkup,
    ExternalScript,
    ExternalStylesheet,
    HeadMarkup,
    InlineScript,
    InlineStyle,
    Placement,
    Title,
)
from pywidget.widget.helpers import inline_script_tag, script_tag, style_tag, stylesheet_tag
from pywidget.widget.policy import RenderPolicy

logger = logging.getLogger(__name__)

_DEFAULT_POLICY = RenderPolicy()

# Media key rendered as a plain <style> block
UNSCOPED_MEDIA = "all"


@dataclass(frozen=True)
class PageContent:
    """Reduced page: plain-text title plus head and body markup."""
    title: str = ""
    head: str = ""
    body: str = ""


def reduce(widget: Widget, policy: Optional[RenderPolicy] = None) -> PageContent:
    """
    Reduce a widget's contributions into a PageContent.

    Single pass in append order:
    - last Title wins
    - stylesheet/script urls keep their first occurrence only
    - inline CSS is bucketed by media key (blank keys fall back to
      ``policy.default_media``), buckets in first-seen order; only "all"
      renders without an @media wrapper
    - head/body markup and inline scripts interleave within their destination

    The head is assembled in ``policy.head_order`` (links, script refs, style
    blocks, head buffer by default). The body is the body buffer, followed by
    the script refs when ``policy.script_placement == "body"``.
    """
    policy = policy or _DEFAULT_POLICY

    title = ""
    stylesheets: Dict[str, tuple] = {}
    scripts: Dict[str, tuple] = {}
    styles: Dict[str, List[str]] = {}
    head_parts: List[str] = []
    body_parts: List[str] = []
    dropped = 0

    for item in widget:
        if isinstance(item, Title):
            title = item.text
        elif isinstance(item, ExternalStylesheet):
            if item.url in stylesheets:
                dropped += 1
            else:
                stylesheets[item.url] = item.attrs
        elif isinstance(item, ExternalScript):
            if item.url in scripts:
                dropped += 1
            else:
                scripts[item.url] = item.attrs
        elif isinstance(item, InlineStyle):
            key = (item.media or "").strip() or policy.default_media
            styles.setdefault(key, []).append(item.css)
        elif isinstance(item, InlineScript):
            target = head_parts if item.placement is Placement.HEAD else body_parts
            target.append(inline_script_tag(item.js))
        elif isinstance(item, HeadMarkup):
            head_parts.append(item.html)
        elif isinstance(item, BodyMarkup):
            body_parts.append(item.html)
        else:
            raise TypeError(f"Not a contribution: {item!r}")

    if dropped:
        logger.debug("Dropped %d duplicate resource reference(s)", dropped)

    script_refs = "".join(script_tag(url, attrs) for url, attrs in scripts.items())
    sections = {
        "stylesheets": "".join(stylesheet_tag(url, attrs) for url, attrs in stylesheets.items()),
        "scripts": script_refs if policy.script_placement == "head" else "",
        "styles": "".join(
            _render_style_block(media, "".join(chunks), policy, stylesheets)
            for media, chunks in styles.items()
        ),
        "head": "".join(head_parts),
    }

    head = "".join(sections[name] for name in policy.head_order)
    body = "".join(body_parts)
    if policy.script_placement == "body":
        body += script_refs

    logger.debug(
        "Reduced %d contribution(s): %d stylesheet(s), %d script(s), %d style block(s)",
        len(widget),
        len(stylesheets),
        len(scripts),
        len(styles),
    )
    return PageContent(title=title, head=head, body=body)


def _render_style_block(
    media: str, css: str, policy: RenderPolicy, linked: Dict[str, tuple]
) -> str:
    media_query = None if media == UNSCOPED_MEDIA else media
    if policy.static_content is not None:
        text = f"@media {media_query}{{{css}}}" if media_query else css
        url = policy.static_content(text)
        if url:
            # Same first-seen rule as ExternalStylesheet
            if url in linked:
                return ""
            linked[url] = ()
            return stylesheet_tag(url)
    return style_tag(css, media_query)
