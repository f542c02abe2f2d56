"""Filter on the exception attached to a log call"""

from typing import Optional, Tuple, Type, Union

from log_facade.core.filter_result import FilterResult
from log_facade.core.log_level import LogLevel
from log_facade.core.marker import Marker
from log_facade.filters.base_filter import BaseFilter


class ThrowableFilter(BaseFilter):
    """
    Match calls whose throwable is an instance of the given type(s).

    A call without a throwable never matches.
    """

    def __init__(
        self,
        exc_types: Union[Type[BaseException], Tuple[Type[BaseException], ...]] = BaseException,
        when_matched: FilterResult = FilterResult.NEUTRAL,
        when_differ: FilterResult = FilterResult.DENY,
    ):
        super().__init__(when_matched, when_differ)
        if not isinstance(exc_types, tuple):
            exc_types = (exc_types,)
        for exc_type in exc_types:
            if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
                raise TypeError(f"not an exception type: {exc_type!r}")
        self.exc_types = exc_types

    def evaluate(
        self,
        logger_name: str,
        level: LogLevel,
        marker: Optional[Marker] = None,
        throwable: Optional[BaseException] = None,
    ) -> FilterResult:
        return self.result(throwable is not None and isinstance(throwable, self.exc_types))

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self.exc_types)
        return f"ThrowableFilter(types=({names}))"
