"""Pydantic schemas for Tour Manager API resources."""

from .accommodation import *  # noqa: F403
from .api_key import *  # noqa: F403
from .category import *  # noqa: F403
from .common import *  # noqa: F403
from .content import *  # noqa: F403
from .departure import *  # noqa: F403
from .extra import *  # noqa: F403
from .fields import *  # noqa: F403
from .holiday import *  # noqa: F403
from .image import *  # noqa: F403
from .location import *  # noqa: F403
from .room_type import *  # noqa: F403
from .user import *  # noqa: F403
