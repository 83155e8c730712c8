"""Pydantic schemas for request/response validation."""

from .common import *  # noqa: F403
from .dashboard import *  # noqa: F403
from .export import *  # noqa: F403
from .file import *  # noqa: F403
from .tour import *  # noqa: F403
from .tourist import *  # noqa: F403
from .transaction import *  # noqa: F403
