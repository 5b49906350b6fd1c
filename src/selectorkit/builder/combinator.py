"""Combinators: joining two selectors with a relational operator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from selectorkit.builder.base import Stringifiable

__all__ = ["Combinator", "CompositeSelector", "combine"]

logger = logging.getLogger(__name__)


class Combinator(Enum):
    """The relational operators defined by CSS."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"


@dataclass(frozen=True)
class CompositeSelector:
    """Two rendered selectors joined by a combinator symbol.

    Operands are stored as text, so mutating a builder after it was
    combined never changes an existing composite.
    """

    left: str
    symbol: str
    right: str

    def stringify(self) -> str:
        return f"{self.left} {self.symbol} {self.right}"

    def __str__(self) -> str:
        return self.stringify()


def combine(
    left: Stringifiable, symbol: Combinator | str, right: Stringifiable
) -> CompositeSelector:
    """Join *left* and *right* with *symbol*.

    Either operand may itself be a ``CompositeSelector``. Any string is
    accepted as the symbol.

    Raises:
        TypeError: If an operand has no ``stringify()`` method.
    """
    for operand in (left, right):
        if not isinstance(operand, Stringifiable):
            raise TypeError(
                f"Cannot combine {type(operand).__name__}: expected an object "
                "with a stringify() method"
            )
    if isinstance(symbol, Combinator):
        symbol = symbol.value
    composite = CompositeSelector(
        left=left.stringify(), symbol=symbol, right=right.stringify()
    )
    logger.debug("Combined selector %r", composite.stringify())
    return composite
