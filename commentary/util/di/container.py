"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from commentary.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically. Callers
    open one request scope per operation, passing the voter identity:

        async with container(context={IdentityResolver: resolver}) as request:
            use_case = await request.get(CastVoteUseCase)

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances)
