"""Holiday and holiday version services."""

from ..core.transport import Transport
from ..schemas.common import Relation
from ..schemas.holiday import Holiday, HolidayListQuery, HolidayVersion
from .attachments import Attachment, attachment_for
from .base import EntityRef, ResourceService, entity_id
from .departure_service import DepartureService


class HolidayService(ResourceService[Holiday]):
    """Service for holiday operations."""

    model = Holiday
    query_model = HolidayListQuery
    orderable = True

    def __init__(self, transport: Transport):
        super().__init__(transport, "holidays")

    def categories(self, holiday: EntityRef) -> Attachment:
        """Categories attached to a holiday."""
        return attachment_for(self.transport, self.owner(holiday), Relation.CATEGORIES)

    def content(self, holiday: EntityRef) -> Attachment:
        """Content items attached to a holiday."""
        return attachment_for(self.transport, self.owner(holiday), Relation.CONTENT)

    def versions(self, holiday: EntityRef) -> "HolidayVersionService":
        """Versions of a holiday."""
        return HolidayVersionService(self.transport, holiday)


class HolidayVersionService(ResourceService[HolidayVersion]):
    """
    Service for the versions of one holiday.

    Versions are ordered within their holiday and are soft deleted like
    holidays.
    """

    model = HolidayVersion
    query_model = HolidayListQuery
    orderable = True

    def __init__(self, transport: Transport, holiday: EntityRef):
        self.holiday_id = entity_id(holiday)
        super().__init__(transport, f"holidays/{self.holiday_id}/versions")

    def departures(self, version: EntityRef) -> DepartureService:
        """Departures of one version."""
        return DepartureService(self.transport, version)

    def categories(self, version: EntityRef) -> Attachment:
        return attachment_for(self.transport, self.owner(version), Relation.CATEGORIES)

    def locations(self, version: EntityRef) -> Attachment:
        return attachment_for(self.transport, self.owner(version), Relation.LOCATIONS)
