"""Dependency container wiring for the library."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime

import httpx

from ucsc_dining.adapters.menu_client import (
    AsyncHttpxMenuClient,
    AsyncMenuClient,
    HttpxMenuClient,
    MenuClient,
)
from ucsc_dining.app_logging import configure_logging
from ucsc_dining.config import Settings
from ucsc_dining.services.menus import AsyncMenuService, MenuService, ServeDateClock


@dataclass
class MenuContainer:
    """Holds the blocking menu client and service."""

    settings: Settings
    menu_client: MenuClient
    menu_service: MenuService
    close_resources: Callable[[], None]


@dataclass
class AsyncMenuContainer:
    """Holds the async menu client and service."""

    settings: Settings
    menu_client: AsyncMenuClient
    menu_service: AsyncMenuService
    close_resources: Callable[[], Awaitable[None]]


def build_clock(
    settings: Settings, clock: Callable[[], datetime] | None = None
) -> ServeDateClock:
    """Create the serve-date clock from settings."""
    return ServeDateClock(timezone_name=settings.timezone_name, clock=clock)


def build_container(
    settings: Settings | None = None,
    transport: httpx.BaseTransport | None = None,
    clock: Callable[[], datetime] | None = None,
) -> MenuContainer:
    """Create the default blocking container."""
    resolved_settings = settings or Settings()
    if resolved_settings.debug:
        configure_logging()
    menu_client = HttpxMenuClient.create(
        endpoint=resolved_settings.endpoint,
        timeout=resolved_settings.timeout_seconds,
        raise_for_status=resolved_settings.raise_for_status,
        transport=transport,
    )
    menu_service = MenuService(
        client=menu_client,
        clock=build_clock(resolved_settings, clock),
        debug=resolved_settings.debug,
    )
    return MenuContainer(
        settings=resolved_settings,
        menu_client=menu_client,
        menu_service=menu_service,
        close_resources=menu_client.close,
    )


def build_async_container(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: Callable[[], datetime] | None = None,
) -> AsyncMenuContainer:
    """Create the default async container."""
    resolved_settings = settings or Settings()
    if resolved_settings.debug:
        configure_logging()
    menu_client = AsyncHttpxMenuClient.create(
        endpoint=resolved_settings.endpoint,
        timeout=resolved_settings.timeout_seconds,
        raise_for_status=resolved_settings.raise_for_status,
        transport=transport,
    )
    menu_service = AsyncMenuService(
        client=menu_client,
        clock=build_clock(resolved_settings, clock),
        debug=resolved_settings.debug,
    )
    return AsyncMenuContainer(
        settings=resolved_settings,
        menu_client=menu_client,
        menu_service=menu_service,
        close_resources=menu_client.close,
    )
