"""Test container with mocked components."""

from dishka import AsyncContainer, make_async_container

from blog.util.di import PROVIDERS, Component, ProviderBase, get_provider


def _mockable() -> dict[Component, type[ProviderBase]]:
    return {
        base.__mock_component__: base
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked by default.

    Args:
        unmock: Components that should use their production implementation,
            e.g. ``{"security"}`` for real bcrypt hashing

    Returns:
        Fresh container with empty in-memory repositories

    Raises:
        ValueError: If a component is unknown or is unmocked without the
            components it depends on
    """
    unmock = unmock or set()
    mockable = _mockable()

    unknown = unmock - mockable.keys()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    for name in unmock:
        missing = mockable[name].__depends_on__ - unmock
        if missing:
            raise ValueError(f"Component '{name}' requires {missing} to be unmocked")

    providers = []
    for base in PROVIDERS:
        name = base.__mock_component__
        use_mock = name in mockable and name not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers)
