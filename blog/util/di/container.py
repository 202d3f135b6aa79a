"""Production container."""

from dishka import AsyncContainer, make_async_container

from blog.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container used by scripts.

    Every mockable component resolves to its production implementation.
    Settings are read from the environment by the config provider.

    Returns:
        Async container; close it when done
    """
    return make_async_container(*(get_provider(base)() for base in PROVIDERS))
