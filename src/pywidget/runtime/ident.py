"""Request-scoped unique identifiers for composed fragments."""
import itertools


class IdentGenerator:
    """Hands out ids that never repeat within one request.

    Fragment authors use these for element ids and class names so two
    copies of the same widget on a page don't collide.
    """

    def __init__(self, prefix: str = "wident") -> None:
        self.prefix = prefix
        self._counter = itertools.count(1)

    def new_ident(self) -> str:
        return f"{self.prefix}{next(self._counter)}"
