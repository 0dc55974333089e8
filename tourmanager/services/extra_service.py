"""Extra service."""

from ..core.transport import Transport
from ..schemas.common import Relation
from ..schemas.extra import Extra, ExtraPrice, ListExtraPricesQuery, ListExtrasQuery
from .attachments import Attachment, attachment_for
from .base import EntityRef, ResourceService, entity_id


class ExtraService(ResourceService[Extra]):
    """Service for extras (optional add-ons sold with holidays)."""

    model = Extra
    query_model = ListExtrasQuery
    orderable = True

    def __init__(self, transport: Transport):
        super().__init__(transport, "extras")

    def categories(self, extra: EntityRef) -> Attachment:
        return attachment_for(self.transport, self.owner(extra), Relation.CATEGORIES)

    def content(self, extra: EntityRef) -> Attachment:
        return attachment_for(self.transport, self.owner(extra), Relation.CONTENT)

    def images(self, extra: EntityRef) -> Attachment:
        return attachment_for(self.transport, self.owner(extra), Relation.IMAGES)

    def prices(self, extra: EntityRef) -> "ExtraPriceService":
        """Prices of an extra."""
        return ExtraPriceService(self.transport, extra)


class ExtraPriceService(ResourceService[ExtraPrice]):
    """Service for the prices of one extra."""

    model = ExtraPrice
    query_model = ListExtraPricesQuery

    def __init__(self, transport: Transport, extra: EntityRef):
        self.extra_id = entity_id(extra)
        super().__init__(transport, f"extras/{self.extra_id}/prices")
