"""Departure service."""

from typing import Optional

from ..core.transport import Transport
from ..schemas.common import Paginated, Relation
from ..schemas.departure import Departure, ListDeparturesQuery
from .attachments import Attachment, attachment_for
from .base import EntityRef, Params, ResourceService, entity_id, query_params, request_body


class DepartureService(ResourceService[Departure]):
    """
    Service for departures.

    Departures live in one collection under ``/holidays/departures``. A
    service bound to a holiday version lists only that version's departures
    and creates new ones in it.
    """

    model = Departure
    query_model = ListDeparturesQuery

    def __init__(self, transport: Transport, version: Optional[EntityRef] = None):
        super().__init__(transport, "holidays/departures")
        self.version_id = entity_id(version) if version is not None else None

    async def list(self, query: Params = None) -> Paginated[Departure]:
        params = query_params(query)
        if self.version_id is not None:
            params["version"] = self.version_id
        return await super().list(params)

    async def create(self, params: Params) -> Departure:
        body = request_body(params)
        if self.version_id is not None:
            body["version_id"] = self.version_id
        return await super().create(body)

    def categories(self, departure: EntityRef) -> Attachment:
        return attachment_for(self.transport, self.owner(departure), Relation.CATEGORIES)
