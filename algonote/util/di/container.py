"""Production container factory."""

from dishka import AsyncContainer, make_async_container

from algonote.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Wire Postgres-backed repositories and services for a real process."""
    return make_async_container(
        *(get_provider(base, use_mock=False)() for base in PROVIDERS)
    )
