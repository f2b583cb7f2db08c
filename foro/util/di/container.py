"""Production container assembly."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from foro.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Assemble every component from its production provider."""
    return make_async_container(
        *(get_provider(base, use_mock=False)() for base in PROVIDERS),
        FastapiProvider(),
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Let routes declared with ``DishkaRoute`` resolve ``FromDishka`` parameters."""
    setup_dishka(container, app)
