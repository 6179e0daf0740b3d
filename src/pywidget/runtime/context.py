"""Per-request widget context."""
from typing import TYPE_CHECKING, Any, Optional, Union

from starlette.responses import HTMLResponse

from pywidget.exceptions import WidgetRenderError
from pywidget.runtime.ident import IdentGenerator
from pywidget.runtime.layout import Layout, default_layout, render_page
from pywidget.widget.accumulator import Widget
from pywidget.widget.contributions import CONTRIBUTION_TYPES, Contribution
from pywidget.widget.policy import RenderPolicy
from pywidget.widget.reduce import PageContent, reduce

if TYPE_CHECKING:
    from starlette.requests import Request


class WidgetContext:
    """
    Everything widget-producing code needs for one request.

    Passed explicitly to widget functions (``def nav(ctx) -> Widget``).
    Holds the page's accumulator, which is reduced exactly once; after that
    the context is spent and further adds or renders raise WidgetRenderError.
    """

    def __init__(
        self,
        request: Optional["Request"] = None,
        policy: Optional[RenderPolicy] = None,
        **state: Any,
    ) -> None:
        self.request = request
        self.policy = policy or RenderPolicy()
        # Free-form request-scoped values (current user, settings, ...)
        self.state = state
        self.widget = Widget()
        self.idents = IdentGenerator()
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def new_ident(self) -> str:
        return self.idents.new_ident()

    def add(self, item: Union[Widget, Contribution]) -> None:
        """Append a widget's contributions, or a single contribution."""
        if self._consumed:
            raise WidgetRenderError("Cannot add to a widget context that was already rendered")
        if isinstance(item, Widget):
            self.widget.extend(item)
        elif isinstance(item, CONTRIBUTION_TYPES):
            self.widget.append(item)
        else:
            raise TypeError(f"Expected Widget or contribution, got {type(item).__name__}")

    def content(self) -> PageContent:
        """Reduce the accumulated widget. Allowed once per context."""
        if self._consumed:
            raise WidgetRenderError("Widget context was already rendered")
        self._consumed = True
        return reduce(self.widget, self.policy)

    def render(self, layout: Layout = default_layout, status_code: int = 200) -> HTMLResponse:
        return render_page(self.content(), layout=layout, status_code=status_code)
