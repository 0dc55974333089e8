"""Many-to-many attachments between an owner entity and a target collection.

An attachment is addressed as ``/{owner type}/{owner id}/{relation}``, e.g.
``/holiday/abc/categories``. Listing is paginated; attach, replace and detach
return an :class:`AttachmentResponse` describing what changed on that call.
"""

import logging
from enum import Enum
from typing import Any, Dict, Generic, Iterable, List, Optional, Tuple, Type, Union

from ..core.exceptions import MalformedResponseError
from ..core.transport import Transport
from ..schemas.category import Category
from ..schemas.common import AttachmentResponse, Entity, EntityT, EntityType, Owner, Paginated, Relation, ReorderCommand
from ..schemas.content import ContentItem
from ..schemas.extra import Extra
from ..schemas.image import Image
from ..schemas.location import Location
from .base import EntityRef, Params, entity_id, parse_model, parse_page, query_params, request_body
from .ordering import wire_value

logger = logging.getLogger(__name__)

RELATION_MODELS: Dict[Relation, Type[Entity]] = {
    Relation.CATEGORIES: Category,
    Relation.CONTENT: ContentItem,
    Relation.IMAGES: Image,
    Relation.LOCATIONS: Location,
    Relation.EXTRAS: Extra,
}


class AttachMode(str, Enum):
    ATTACH = "attach"
    REPLACE = "replace"
    DETACH = "detach"


def unique_ids(ids: Iterable[str]) -> List[str]:
    """De-duplicate ids, keeping first-seen order."""
    if isinstance(ids, str):
        raise TypeError("ids must be a collection of ids, not a single string")
    return list(dict.fromkeys(str(i) for i in ids))


def membership_diff(
    current: Iterable[str], ids: Iterable[str], mode: AttachMode
) -> Tuple[List[str], AttachmentResponse]:
    """
    Compute the effect of an attach, replace or detach call.

    ``attach`` adds missing ids, ``replace`` makes the membership exactly
    ``ids`` and ``detach`` removes present ids. Already-present or absent ids
    change nothing and are not reported.

    Args:
        current: Current membership
        ids: Ids sent with the call
        mode: Operation

    Returns:
        The new membership (existing members first, in their order) and the
        change report
    """
    members = unique_ids(current)
    requested = unique_ids(ids)
    member_set = set(members)
    requested_set = set(requested)

    if mode is AttachMode.ATTACH:
        added = [i for i in requested if i not in member_set]
        return members + added, AttachmentResponse(attached=added)

    if mode is AttachMode.REPLACE:
        added = [i for i in requested if i not in member_set]
        removed = [m for m in members if m not in requested_set]
        kept = [m for m in members if m in requested_set]
        return kept + added, AttachmentResponse(attached=added, detached=removed)

    removed = [m for m in members if m in requested_set]
    kept = [m for m in members if m not in requested_set]
    return kept, AttachmentResponse(detached=removed)


class Attachment(Generic[EntityT]):
    """Client for the members of one relation of one owner."""

    def __init__(
        self,
        transport: Transport,
        owner: Owner,
        relation: Relation,
        model: Optional[Type[EntityT]] = None,
    ):
        self.transport = transport
        self.owner = owner
        self.relation = relation
        self.model = model or RELATION_MODELS[relation]

    @property
    def path(self) -> str:
        return f"/{self.owner.type.value}/{self.owner.id}/{self.relation.value}"

    async def list(self, query: Params = None) -> Paginated[EntityT]:
        """List the attached entities."""
        payload = await self.transport.get(self.path, params=query_params(query))
        return parse_page(self.model, payload, self.path)

    async def attach(self, ids: Iterable[str]) -> AttachmentResponse:
        """
        Attach additional entities, preserving the existing ones.

        Returns:
            Ids that were not attached before this call
        """
        ids = unique_ids(ids)
        if not ids:
            return AttachmentResponse()
        payload = await self.transport.patch(self.path, {"ids": ids})
        return self._diff(payload, AttachMode.ATTACH)

    async def replace(self, ids: Iterable[str]) -> AttachmentResponse:
        """
        Make ``ids`` the exact set of attached entities.

        An empty list detaches everything.
        """
        payload = await self.transport.put(self.path, {"ids": unique_ids(ids)})
        return self._diff(payload, AttachMode.REPLACE)

    async def detach(self, ids: Iterable[str]) -> AttachmentResponse:
        """
        Detach entities. Ids that are not attached are ignored.

        An empty ``ids`` sends nothing: the API would read a missing id list
        as "detach everything".
        """
        ids = unique_ids(ids)
        if not ids:
            return AttachmentResponse()
        payload = await self.transport.delete(self.path, params={"ids": ids}, expect_body=True)
        return self._diff(payload, AttachMode.DETACH)

    async def update(self, ref: EntityRef, pivot: Params) -> EntityT:
        """Update metadata stored on the link to one attached entity."""
        payload = await self.transport.patch(f"{self.path}/{entity_id(ref)}", request_body(pivot))
        return parse_model(self.model, payload, self.path)

    async def move(self, ref: EntityRef, command: ReorderCommand) -> Optional[int]:
        """
        Reorder an attached entity within this owner's list (e.g. a gallery).

        Returns:
            The new position when the server reports one
        """
        payload = await self.transport.post(
            f"{self.path}/{entity_id(ref)}/order",
            {"ordering": wire_value(command)},
            expect_body=False,
        )
        if isinstance(payload, dict) and payload.get("ordering") is not None:
            return int(payload["ordering"])
        return None

    def _diff(self, payload: Any, mode: AttachMode) -> AttachmentResponse:
        if not isinstance(payload, dict):
            raise MalformedResponseError(
                "Attachment response must be a JSON object", uri=self.path, body=payload
            )
        response = parse_model(AttachmentResponse, payload, self.path)
        logger.info(
            "Attachment updated",
            extra={
                "owner_type": self.owner.type.value,
                "owner_id": self.owner.id,
                "relation": self.relation.value,
                "mode": mode.value,
                "attached": len(response.attached),
                "detached": len(response.detached),
                "updated": len(response.updated),
            }
        )
        return response


def attachment_for(
    transport: Transport,
    owner: Union[Owner, Entity],
    relation: Union[Relation, str],
) -> Attachment:
    """
    Build the attachment client for ``owner``'s ``relation``.

    Args:
        transport: Shared transport
        owner: An owner entity, or an ``Owner(type, id)`` pair
        relation: Target collection

    Raises:
        ValueError: If an owner entity does not support the relation
    """
    relation = Relation(relation)
    if isinstance(owner, Entity):
        if relation not in owner.relations:
            raise ValueError(f"{type(owner).__name__} has no '{relation.value}' attachments")
        owner = owner.owner
    return Attachment(transport, Owner(EntityType(owner.type), owner.id), relation)
