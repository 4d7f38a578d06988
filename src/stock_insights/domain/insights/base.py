# insights/base.py

from abc import ABC, abstractmethod
from collections.abc import Awaitable

from stock_insights.schemas import Stock


class Insight(ABC):
    """
    A single analytical rule evaluated against a stock.

    Subclasses set `key`, `title` and `description` and implement `verify`,
    either as a coroutine or as a plain method returning a bool. `verify`
    only reads the stock and must not depend on other insights.

    Raising InsufficientDataError signals that the stock lacks the data the
    rule needs; the evaluation engine records that as indeterminate.
    """

    key: str
    title: str
    description: str = ""

    @abstractmethod
    def verify(self, stock: Stock) -> bool | Awaitable[bool]:
        """
        Decide whether the rule holds for the given stock.

        Args:
            stock: The stock to inspect.

        Returns:
            bool | Awaitable[bool]: True when the rule holds.

        Raises:
            InsufficientDataError: If the stock lacks required data.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"
