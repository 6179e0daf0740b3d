"""Contribution types appended to a widget."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Union

Attrs = Tuple[Tuple[str, Any], ...]


class Placement(str, Enum):
    """Destination of an inline script."""

    HEAD = "head"
    BODY = "body"


@dataclass(frozen=True)
class Title:
    """Page title. The last one appended wins."""
    text: str


@dataclass(frozen=True)
class ExternalStylesheet:
    """<link rel="stylesheet"> reference, rendered once per url."""
    url: str
    attrs: Attrs = ()


@dataclass(frozen=True)
class ExternalScript:
    """<script src> reference, rendered once per url."""
    url: str
    attrs: Attrs = ()


@dataclass(frozen=True)
class InlineStyle:
    """Raw CSS, optionally scoped to a media query."""
    css: str
    media: Optional[str] = None


@dataclass(frozen=True)
class InlineScript:
    """Raw JavaScript placed in the head or the body."""
    js: str
    placement: Placement = Placement.HEAD

    def __post_init__(self) -> None:
        # Accept "head"/"body" but reject anything else up front
        object.__setattr__(self, "placement", Placement(self.placement))


@dataclass(frozen=True)
class HeadMarkup:
    """Markup appended to the document head."""
    html: str


@dataclass(frozen=True)
class BodyMarkup:
    """Markup appended to the document body."""
    html: str


Contribution = Union[
    Title,
    ExternalStylesheet,
    ExternalScript,
    InlineStyle,
    InlineScript,
    HeadMarkup,
    BodyMarkup,
]

CONTRIBUTION_TYPES = (
    Title,
    ExternalStylesheet,
    ExternalScript,
    InlineStyle,
    InlineScript,
    HeadMarkup,
    BodyMarkup,
)


def to_attrs(attrs: Optional[dict] = None) -> Attrs:
    """Freeze an attribute dict into the ordered tuple form stored on references."""
    if not attrs:
        return ()
    return tuple((str(k), v) for k, v in attrs.items())
