"""Test container with per-component mocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from foro.util.di import PROVIDERS, Component, get_provider


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every component is mocked except ``unmock``.

    Settings come from the environment, as in production.

    Examples:
        build_test_container()                        # all in memory
        build_test_container(unmock={"persistence"})  # real PostgreSQL

    Raises:
        ValueError: If ``unmock`` names an unknown component
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = []
    for base in PROVIDERS:
        use_mock = (
            base.__mock_component__ is not None
            and base.__mock_component__ not in unmock
        )
        providers.append(get_provider(base, use_mock=use_mock)())

    # FastapiProvider lets the same container back a TestClient
    return make_async_container(*providers, FastapiProvider())
