"""Provider base with the metadata used to pick implementations."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["security"]


class ProviderBase(Provider):
    """dishka provider carrying component metadata.

    Attributes:
        __mock_component__: Name of the swappable component, None for
            providers that are always used as-is
        __is_mock__: Marks the test implementation of a component
        __depends_on__: Components that have to be unmocked together with
            this one
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
    __depends_on__: ClassVar[set[Component]] = set()
