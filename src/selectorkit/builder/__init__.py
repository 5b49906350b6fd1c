from selectorkit.builder.base import Stringifiable
from selectorkit.builder.combinator import Combinator, CompositeSelector, combine
from selectorkit.builder.facade import SelectorFacade
from selectorkit.builder.selector import SelectorBuilder

__all__ = [
    "Combinator",
    "CompositeSelector",
    "SelectorBuilder",
    "SelectorFacade",
    "Stringifiable",
    "combine",
]
