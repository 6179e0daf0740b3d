"""Widget accumulation and reduction."""

from pywidget.widget.accumulator import Widget, compose
from pywidget.widget.contributions import (
    BodyMarkup,
    Contribution,
    ExternalScript,
    ExternalStylesheet,
    HeadMarkup,
    InlineScript,
    InlineStyle,
    Placement,
    Title,
)
from pywidget.widget.policy import RenderPolicy
from pywidget.widget.reduce import PageContent, reduce

__all__ = [
    "BodyMarkup",
    "Contribution",
    "ExternalScript",
    "ExternalStylesheet",
    "HeadMarkup",
    "InlineScript",
    "InlineStyle",
    "PageContent",
    "Placement",
    "RenderPolicy",
    "Title",
    "Widget",
    "compose",
    "reduce",
]
