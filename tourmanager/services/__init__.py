"""Services wrapping the Tour Manager API resources."""

from .accommodation_service import AccommodationService
from .api_key_service import ApiKeyService
from .attachments import Attachment, AttachMode, attachment_for, membership_diff
from .base import ResourceService
from .category_service import CategoryService
from .content_service import ContentService
from .departure_service import DepartureService
from .extra_service import ExtraPriceService, ExtraService
from .holiday_service import HolidayService, HolidayVersionService
from .image_service import ImageService
from .location_service import LocationService
from .ordering import reorder
from .room_type_service import RoomTypeService
from .user_service import UserService

__all__ = [
    "AccommodationService",
    "ApiKeyService",
    "AttachMode",
    "Attachment",
    "CategoryService",
    "ContentService",
    "DepartureService",
    "ExtraPriceService",
    "ExtraService",
    "HolidayService",
    "HolidayVersionService",
    "ImageService",
    "LocationService",
    "ResourceService",
    "RoomTypeService",
    "UserService",
    "attachment_for",
    "membership_diff",
    "reorder",
]
