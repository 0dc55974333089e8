"""Generic resource service: listing, CRUD, soft delete and ordering."""

import logging
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Dict, Generic, Mapping, Optional, Type, Union

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from ..core.exceptions import MalformedResponseError
from ..core.transport import Transport
from ..schemas.common import Entity, EntityT, Owner, Paginated, PaginatedQuery, ReorderCommand
from .ordering import wire_value

logger = logging.getLogger(__name__)

EntityRef = Union[str, Entity]
Params = Union[BaseModel, Mapping[str, Any], None]


def entity_id(ref: EntityRef) -> str:
    """Return the id of an entity or pass an id through."""
    return ref.id if isinstance(ref, Entity) else ref


def request_body(params: Params) -> Dict[str, Any]:
    """
    Serialize request parameters for a JSON body.

    Only fields that were explicitly set are sent, so ``parent_id=None``
    clears a parent while an omitted field is left untouched.
    """
    if params is None:
        return {}
    if isinstance(params, BaseModel):
        return params.model_dump(mode="json", exclude_unset=True, by_alias=True)
    return dict(params)


def query_params(query: Params) -> Dict[str, Any]:
    """Flatten a list query into parameters for the query string."""
    if query is None:
        return {}
    if isinstance(query, BaseModel):
        return query.model_dump(exclude_none=True, by_alias=True)
    return {k: v for k, v in query.items() if v is not None}


def parse_model(model: Type[BaseModel], payload: Any, uri: str = "") -> Any:
    """Validate a response body into ``model``; structure errors are fatal."""
    try:
        return model.model_validate(payload)
    except SchemaValidationError as e:
        raise MalformedResponseError(
            f"Response does not match the {model.__name__} schema: {e}",
            uri=uri,
            body=payload,
        ) from e


def parse_page(model: Type[EntityT], payload: Any, uri: str = "") -> Paginated[EntityT]:
    """
    Validate a pagination envelope.

    A missing ``data`` key is never read as an empty page.
    """
    if not isinstance(payload, dict) or "data" not in payload:
        raise MalformedResponseError(
            "Paginated response is missing the 'data' field", uri=uri, body=payload
        )
    return parse_model(Paginated[model], payload, uri)


class ResourceService(Generic[EntityT]):
    """
    Service for one resource collection.

    Subclasses set ``model`` and pass their collection path. Methods that
    act on a single record accept either an id or an entity; when given an
    entity they update its fields in place from the server's response.
    """

    model: Type[EntityT]
    query_model: Type[PaginatedQuery] = PaginatedQuery

    #: DELETE trashes rather than purges, and PUT .../restore undoes it.
    soft_deletes: bool = True
    #: PATCH accepts ``{"ordering": <command>}``.
    orderable: bool = False

    def __init__(self, transport: Transport, base_path: str):
        self.transport = transport
        self.base_path = "/" + base_path.strip("/")

    def owner(self, ref: EntityRef) -> Union[Entity, Owner]:
        """Attachment owner for a record of this collection."""
        if isinstance(ref, Entity):
            return ref
        return Owner(self.model.entity_type, ref)

    def path(self, ref: Optional[EntityRef] = None) -> str:
        if ref is None:
            return self.base_path
        return f"{self.base_path}/{entity_id(ref)}"

    def build(self, payload: Any) -> EntityT:
        """Construct an entity from a response body."""
        return parse_model(self.model, payload, self.base_path)

    async def list(self, query: Params = None) -> Paginated[EntityT]:
        """
        List one page of the collection.

        Args:
            query: Paging, trash and resource-specific filters

        Returns:
            Page of entities
        """
        payload = await self.transport.get(self.base_path, params=query_params(query))
        return parse_page(self.model, payload, self.base_path)

    async def iterate(self, query: Optional[PaginatedQuery] = None) -> AsyncIterator[EntityT]:
        """Yield every entity matching ``query``, fetching page after page."""
        query = query or self.query_model()
        page_number = query.page or 1
        while True:
            page = await self.list(query.model_copy(update={"page": page_number}))
            for entity in page.data:
                yield entity
            if not page.data or not page.has_more:
                return
            page_number = page.current_page + 1

    async def find(self, ref: EntityRef) -> EntityT:
        payload = await self.transport.get(self.path(ref))
        return self.build(payload)

    async def create(self, params: Params) -> EntityT:
        payload = await self.transport.post(self.base_path, request_body(params))
        entity = self.build(payload)
        logger.info(
            "Resource created",
            extra={"resource": self.base_path, "id": entity.id}
        )
        return entity

    async def update(self, ref: EntityRef, params: Params) -> EntityT:
        """
        Partially update a record.

        Returns:
            The updated entity; the same object when ``ref`` is an entity
        """
        payload = await self.transport.patch(self.path(ref), request_body(params))
        return self._apply(ref, payload)

    async def destroy(self, ref: EntityRef) -> None:
        """
        Delete a record.

        For soft-deleting resources a given entity is marked trashed locally
        with the current time. The server's own timestamp is not fetched.
        """
        await self.transport.delete(self.path(ref))

        if self.soft_deletes and isinstance(ref, Entity):
            ref.deleted_at = datetime.now(timezone.utc)

        logger.info(
            "Resource deleted",
            extra={"resource": self.base_path, "id": entity_id(ref), "soft": self.soft_deletes}
        )

    async def restore(self, ref: EntityRef) -> EntityT:
        """
        Restore a trashed record.

        Returns:
            The restored entity; the same object when ``ref`` is an entity

        Raises:
            TypeError: If the resource does not support soft delete
        """
        if not self.soft_deletes:
            raise TypeError(f"{self.base_path} does not support restore")

        payload = await self.transport.put(f"{self.path(ref)}/restore", expect_body=False)

        if payload is None:
            if isinstance(ref, Entity):
                ref.deleted_at = None
                entity = ref
            else:
                entity = await self.find(ref)
        else:
            entity = self._apply(ref, payload)
            entity.deleted_at = None

        logger.info(
            "Resource restored",
            extra={"resource": self.base_path, "id": entity.id}
        )
        return entity

    async def move(self, ref: EntityRef, command: ReorderCommand) -> int:
        """
        Reorder a record within its ordering scope.

        Moving past either end of the scope is a no-op on the server. Only
        the moved record's new value is returned; siblings must be fetched
        again to see theirs.

        Returns:
            The record's new ``ordering``

        Raises:
            TypeError: If the resource is not manually ordered
            ValueError: If the command is not recognized
        """
        if not self.orderable:
            raise TypeError(f"{self.base_path} is not manually ordered")

        payload = await self.transport.patch(self.path(ref), {"ordering": wire_value(command)})
        entity = self._apply(ref, payload)
        return entity.ordering

    def _apply(self, ref: EntityRef, payload: Any) -> EntityT:
        fresh = self.build(payload)
        if not isinstance(ref, Entity):
            return fresh

        # id is immutable; everything else mirrors the response
        for name, value in fresh:
            if name != "id":
                setattr(ref, name, value)
        return ref
