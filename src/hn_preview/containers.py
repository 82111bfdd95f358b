"""Dependency container wiring for the preview engine."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from hn_preview.adapters.html_surface import InMemoryHtmlSurface
from hn_preview.adapters.profile_client import HttpxProfilePageClient
from hn_preview.config import Settings
from hn_preview.domain.geometry import Viewport
from hn_preview.services.cache import ProfileCache
from hn_preview.services.coordinator import PopoverCoordinator, ViewportProvider
from hn_preview.services.events import HoverEventRouter, PointerEvent
from hn_preview.services.fetcher import ProfileFetcher
from hn_preview.services.hover_intent import HoverIntentController
from hn_preview.services.presenter import PopoverPresenter, PopoverSurface
from hn_preview.services.profiles import ProfileService
from hn_preview.services.theme import ThemeTokens, resolve_theme
from hn_preview.services.timers import AsyncioScheduler, Scheduler


@dataclass
class PreviewContainer:
    """Holds the dependencies of one preview engine instance."""

    settings: Settings
    profile_cache: ProfileCache
    profile_fetcher: ProfileFetcher
    profile_service: ProfileService
    theme: ThemeTokens
    close_resources: Callable[[], Awaitable[None]]


@dataclass
class HoverPreview:
    """A fully wired popover engine bound to one surface."""

    router: HoverEventRouter
    controller: HoverIntentController
    coordinator: PopoverCoordinator
    presenter: PopoverPresenter
    unsubscribe: Callable[[], None]

    def dispatch(self, event: PointerEvent) -> None:
        """Feed a raw pointer event into the engine."""
        self.router.dispatch(event)

    def close(self) -> None:
        """Stop listening and hide the popover."""
        self.unsubscribe()
        self.controller.reset()
        self.presenter.hide()


def build_container(settings: Settings | None = None) -> PreviewContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    profile_client = HttpxProfilePageClient.create(
        base_url=resolved_settings.profile_base_url,
        timeout_seconds=resolved_settings.fetch_timeout_seconds,
    )
    profile_cache = ProfileCache(
        ttl_seconds=resolved_settings.cache_ttl_seconds,
        max_entries=resolved_settings.cache_max_entries,
    )
    profile_fetcher = ProfileFetcher(
        client=profile_client,
        base_url=resolved_settings.profile_base_url,
        timeout_seconds=resolved_settings.fetch_timeout_seconds,
    )
    profile_service = ProfileService(fetcher=profile_fetcher, cache=profile_cache)

    async def close_resources() -> None:
        await profile_client.close()

    return PreviewContainer(
        settings=resolved_settings,
        profile_cache=profile_cache,
        profile_fetcher=profile_fetcher,
        profile_service=profile_service,
        theme=resolve_theme(resolved_settings.theme),
        close_resources=close_resources,
    )


def _default_viewport() -> Viewport:
    return Viewport(width=1024, height=768)


def create_hover_preview(
    container: PreviewContainer,
    surface: PopoverSurface | None = None,
    viewport: ViewportProvider | None = None,
    scheduler: Scheduler | None = None,
) -> HoverPreview:
    """Assemble a hover preview engine over a surface.

    Without a surface, an in-memory one sized to the configured popover width
    is used. Without a viewport provider, a fixed 1024x768 viewport is used.
    """
    settings = container.settings
    if surface is None:
        surface = InMemoryHtmlSurface(width=settings.popover_width)
    if viewport is None:
        viewport = _default_viewport
    presenter = PopoverPresenter(
        surface=surface,
        width=settings.popover_width,
        estimated_height=settings.popover_estimated_height,
    )
    coordinator = PopoverCoordinator(
        profile_service=container.profile_service,
        presenter=presenter,
        viewport=viewport,
        abort_superseded_fetches=settings.abort_superseded_fetches,
    )
    controller = HoverIntentController(
        scheduler=scheduler or AsyncioScheduler(),
        on_show=coordinator.show,
        on_hide=coordinator.hide,
        on_reanchor=coordinator.reanchor,
        show_delay_ms=settings.show_delay_ms,
        hide_delay_ms=settings.hide_delay_ms,
    )
    router = HoverEventRouter()
    unsubscribe = router.subscribe(controller)
    return HoverPreview(
        router=router,
        controller=controller,
        coordinator=coordinator,
        presenter=presenter,
        unsubscribe=unsubscribe,
    )
