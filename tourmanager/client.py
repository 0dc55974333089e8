"""Tour Manager API client."""

from typing import Any, Optional, Union

import httpx

from .core.config import Settings
from .core.observability import get_logger
from .core.transport import Credentials, Transport
from .schemas.common import Entity, EntityType, Owner, Relation
from .services import (
    AccommodationService,
    ApiKeyService,
    Attachment,
    CategoryService,
    ContentService,
    DepartureService,
    ExtraService,
    HolidayService,
    ImageService,
    LocationService,
    UserService,
    attachment_for,
)

logger = get_logger(__name__)


class TourManager:
    """
    Client for the RezKit Tour Manager API.

    Example::

        async with TourManager(api_key="...") as client:
            page = await client.holidays.list(HolidayListQuery(limit=50))
            tree = await client.categories("holiday").tree()
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        api_key: Optional[Credentials] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **client_kwargs: Any,
    ):
        """
        Create a client.

        Args:
            settings: Client settings; read from the environment when omitted
            api_key: API key or async credential provider, overriding settings.
                Without any key the client uses cookie session auth.
            base_url: Base URL override, mostly for testing
            transport: httpx transport override
            client_kwargs: Extra keyword arguments for :class:`httpx.AsyncClient`
        """
        settings = settings or Settings()
        if base_url:
            settings = settings.model_copy(update={"api_url": base_url.rstrip("/")})

        self.settings = settings
        self.transport = Transport(settings, credentials=api_key, transport=transport, **client_kwargs)

        logger.debug("Tour Manager client created", base_url=settings.api_url)

    @property
    def holidays(self) -> HolidayService:
        return HolidayService(self.transport)

    @property
    def user(self) -> UserService:
        return UserService(self.transport)

    @property
    def api_keys(self) -> ApiKeyService:
        """API key management."""
        return ApiKeyService(self.transport)

    @property
    def images(self) -> ImageService:
        return ImageService(self.transport)

    @property
    def locations(self) -> LocationService:
        return LocationService(self.transport)

    @property
    def accommodations(self) -> AccommodationService:
        return AccommodationService(self.transport)

    @property
    def extras(self) -> ExtraService:
        return ExtraService(self.transport)

    @property
    def departures(self) -> DepartureService:
        """Departures across every holiday version."""
        return DepartureService(self.transport)

    def categories(self, type: Union[EntityType, str]) -> CategoryService:
        """Category management for one entity type."""
        return CategoryService(self.transport, type)

    def content(self, type: Union[EntityType, str]) -> ContentService:
        """Content management for one entity type."""
        return ContentService(self.transport, type)

    def attached(self, owner: Union[Owner, Entity], relation: Union[Relation, str]) -> Attachment:
        """Attachment client for any owner and relation."""
        return attachment_for(self.transport, owner, relation)

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> "TourManager":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
