"""Compose pages from independently authored widgets."""

from pywidget.config import load_config
from pywidget.exceptions import WidgetConfigError, WidgetError, WidgetRenderError
from pywidget.runtime import IdentGenerator, WidgetContext, default_layout, render_page
from pywidget.widget import (
    BodyMarkup,
    ExternalScript,
    ExternalStylesheet,
    HeadMarkup,
    InlineScript,
    InlineStyle,
    PageContent,
    Placement,
    RenderPolicy,
    Title,
    Widget,
    compose,
    reduce,
)

__all__ = [
    "BodyMarkup",
    "ExternalScript",
    "ExternalStylesheet",
    "HeadMarkup",
    "IdentGenerator",
    "InlineScript",
    "InlineStyle",
    "PageContent",
    "Placement",
    "RenderPolicy",
    "Title",
    "Widget",
    "WidgetConfigError",
    "WidgetContext",
    "WidgetError",
    "WidgetRenderError",
    "compose",
    "default_layout",
    "load_config",
    "reduce",
    "render_page",
]
