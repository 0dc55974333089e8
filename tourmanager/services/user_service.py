"""User and organization service."""

from typing import List

from ..core.exceptions import MalformedResponseError
from ..core.transport import Transport
from ..schemas.user import Organization, User
from .base import parse_model


class UserService:
    """Read-only access to the caller's profile and organizations."""

    def __init__(self, transport: Transport):
        self.transport = transport

    async def user(self) -> User:
        """Get the user profile of the API caller."""
        payload = await self.transport.get("/user")
        return parse_model(User, payload, "/user")

    async def organization(self) -> Organization:
        """Get the caller's current organization."""
        payload = await self.transport.get("/organization")
        return parse_model(Organization, payload, "/organization")

    async def organizations(self) -> List[Organization]:
        """Get every organization the caller belongs to."""
        payload = await self.transport.get("/organizations")
        if not isinstance(payload, list):
            raise MalformedResponseError(
                "Expected a list of organizations", uri="/organizations", body=payload
            )
        return [parse_model(Organization, o, "/organizations") for o in payload]
