"""selectorkit: a fluent builder for CSS selectors."""

from selectorkit.builder import (
    Combinator,
    CompositeSelector,
    SelectorBuilder,
    SelectorFacade,
    Stringifiable,
    combine,
)
from selectorkit.config import BuilderConfig
from selectorkit.errors import (
    DuplicateCategoryError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorError,
)
from selectorkit.model import Category

__version__ = "0.1.0"

css_selector_builder = SelectorFacade()

__all__ = [
    "BuilderConfig",
    "Category",
    "Combinator",
    "CompositeSelector",
    "DuplicateCategoryError",
    "InvalidCombinatorError",
    "OrderViolationError",
    "SelectorBuilder",
    "SelectorError",
    "SelectorFacade",
    "Stringifiable",
    "combine",
    "css_selector_builder",
]
