"""API key service."""

import logging

from ..core.transport import Transport
from ..schemas.api_key import ApiKey, CreateApiKeyRequest, CreateApiKeyResponse
from .base import ResourceService, parse_model, request_body

logger = logging.getLogger(__name__)


class ApiKeyService(ResourceService[ApiKey]):
    """Service for API key management. Deleting a key revokes it permanently."""

    model = ApiKey
    soft_deletes = False

    def __init__(self, transport: Transport):
        super().__init__(transport, "api-keys")

    async def create(self, params: CreateApiKeyRequest) -> CreateApiKeyResponse:
        """
        Create an API key.

        Returns:
            The key and its plain-text secret; the secret cannot be fetched again
        """
        payload = await self.transport.post(self.base_path, request_body(params))
        response = parse_model(CreateApiKeyResponse, payload, self.base_path)
        logger.info(
            "API key created",
            extra={"id": response.access_token.id, "key_name": response.access_token.name}
        )
        return response
