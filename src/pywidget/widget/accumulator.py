"""Widget accumulator: ordered page contributions with associative composition."""
from typing import Iterable, Iterator, List, Optional, Union

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
    to_attrs,
)


class Widget:
    """Collects contributions in append order.

    One instance per page (or reusable fragment) being composed. Combining
    two widgets never mutates either side: ``a + b`` returns a new widget
    holding a's contributions followed by b's.
    """

    def __init__(self, contributions: Optional[Iterable[Contribution]] = None) -> None:
        self._contributions: List[Contribution] = list(contributions or ())

    @classmethod
    def empty(cls) -> "Widget":
        """Identity element for composition."""
        return cls()

    def append(self, contribution: Contribution) -> None:
        """Add one contribution at the end."""
        self._contributions.append(contribution)

    def extend(self, other: Union["Widget", Iterable[Contribution]]) -> None:
        """Append every contribution of another widget (or iterable) in order."""
        # Snapshot first so w.extend(w) repeats w once
        self._contributions.extend(list(other))

    @property
    def contributions(self) -> tuple:
        return tuple(self._contributions)

    def __iter__(self) -> Iterator[Contribution]:
        return iter(self._contributions)

    def __len__(self) -> int:
        return len(self._contributions)

    def __bool__(self) -> bool:
        return bool(self._contributions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Widget):
            return NotImplemented
        return self._contributions == other._contributions

    def __add__(self, other: "Widget") -> "Widget":
        if not isinstance(other, Widget):
            return NotImplemented
        return Widget(self._contributions + other._contributions)

    def __radd__(self, other: object) -> "Widget":
        # Lets sum(widgets) start from the int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return Widget(self._contributions)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Widget({self._contributions!r})"

    # Convenience appenders

    def set_title(self, text: str) -> None:
        self.append(Title(text))

    def add_stylesheet(self, url: str, attrs: Optional[dict] = None) -> None:
        self.append(ExternalStylesheet(url, to_attrs(attrs)))

    def add_script(self, url: str, attrs: Optional[dict] = None) -> None:
        self.append(ExternalScript(url, to_attrs(attrs)))

    def add_style(self, css: str, media: Optional[str] = None) -> None:
        self.append(InlineStyle(css, media))

    def add_head_script(self, js: str) -> None:
        self.append(InlineScript(js, Placement.HEAD))

    def add_body_script(self, js: str) -> None:
        self.append(InlineScript(js, Placement.BODY))

    def add_head(self, html: str) -> None:
        self.append(HeadMarkup(html))

    def add_body(self, html: str) -> None:
        self.append(BodyMarkup(html))


def compose(*widgets: Widget) -> Widget:
    """Concatenate widgets left to right into a new widget.

    Grouping never matters: ``compose(compose(a, b), c) == compose(a, compose(b, c))``.
    """
    result = Widget()
    for widget in widgets:
        result.extend(widget)
    return result
