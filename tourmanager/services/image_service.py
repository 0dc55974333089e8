"""Image service. Uploading new image files is not supported."""

from typing import Any, List, Optional

from ..core.exceptions import MalformedResponseError
from ..core.transport import Transport
from ..schemas.image import Image, ImageLinkParams, ListImagesQuery
from .base import EntityRef, ResourceService, query_params


class ImageService(ResourceService[Image]):
    """Service for the image library."""

    model = Image
    query_model = ListImagesQuery
    soft_deletes = False

    def __init__(self, transport: Transport):
        super().__init__(transport, "images")

    async def link(self, image: EntityRef, params: Optional[ImageLinkParams] = None) -> str:
        """
        Get a URL for an image with optional transformations applied.

        Args:
            image: Image or image ID
            params: Size, quality and colour transformations

        Returns:
            Image URL
        """
        payload = await self.transport.get(f"{self.path(image)}/link", params=query_params(params))
        if not isinstance(payload, dict) or not isinstance(payload.get("link"), str):
            raise MalformedResponseError(
                "Image link response is missing the 'link' field",
                uri=f"{self.path(image)}/link",
                body=payload,
            )
        return payload["link"]

    async def uses(self, image: EntityRef) -> List[Any]:
        """Get the entities an image is attached to, as decoded JSON."""
        return await self.transport.get(f"{self.path(image)}/uses")
