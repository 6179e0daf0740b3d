"""Runtime components."""

from pywidget.runtime.context import WidgetContext
from pywidget.runtime.ident import IdentGenerator
from pywidget.runtime.layout import default_layout, render_page

__all__ = ["IdentGenerator", "WidgetContext", "default_layout", "render_page"]
