"""Entry point object: one factory per selector category plus combine."""

from __future__ import annotations

from selectorkit.builder.base import Stringifiable
from selectorkit.builder.combinator import Combinator, CompositeSelector, combine
from selectorkit.builder.selector import SelectorBuilder
from selectorkit.config import BuilderConfig
from selectorkit.errors import InvalidCombinatorError

__all__ = ["SelectorFacade"]

_CSS_COMBINATORS = frozenset(c.value for c in Combinator)


class SelectorFacade:
    """Creates a fresh ``SelectorBuilder`` for every factory call.

    The only state kept between calls is the last composite produced by
    ``combine``, which ``stringify`` passes through.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()
        self._last: CompositeSelector | None = None

    def element(self, value: str) -> SelectorBuilder:
        """Start a selector with a type selector, e.g. ``div``."""
        return SelectorBuilder().set_element(value)

    def id(self, value: str) -> SelectorBuilder:
        """Start a selector with an id, rendered as ``#value``."""
        return SelectorBuilder().set_id(value)

    def class_(self, value: str) -> SelectorBuilder:
        """Start a selector with a class, rendered as ``.value``."""
        return SelectorBuilder().add_class(value)

    def attr(self, value: str) -> SelectorBuilder:
        """Start a selector with an attribute test, rendered as ``[value]``."""
        return SelectorBuilder().add_attribute(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        """Start a selector with a pseudo-class, rendered as ``:value``."""
        return SelectorBuilder().add_pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        """Start a selector with a pseudo-element, rendered as ``::value``."""
        return SelectorBuilder().set_pseudo_element(value)

    def combine(
        self, left: Stringifiable, symbol: Combinator | str, right: Stringifiable
    ) -> CompositeSelector:
        """Join two selectors; see :func:`selectorkit.builder.combinator.combine`.

        Raises:
            InvalidCombinatorError: In strict mode, if *symbol* is not one of
                the CSS combinators.
        """
        raw = symbol.value if isinstance(symbol, Combinator) else symbol
        if self.config.strict_combinators and raw not in _CSS_COMBINATORS:
            raise InvalidCombinatorError(raw)
        self._last = combine(left, raw, right)
        return self._last

    def stringify(self) -> str:
        """Return the text of the last composite, or ``""`` if none yet."""
        return self._last.stringify() if self._last is not None else ""
