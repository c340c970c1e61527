"""
Pivotal Tracker API client

A typed client for the Pivotal Tracker v5 REST API covering stories, epics,
tasks, comments, blockers and labels.

Usage:
    from pivotal_client import Client

    with Client(token="...") as client:
        # Everything matching a filter, in one call
        stories = client.stories.list(99, filter="state:started")

        # On demand, one page at a time
        for epic in client.epics.iterate(99):
            print(epic.name)

Architecture:
    Client (httpx transport) → StoryService / EpicService
                                      ↓
                     Cursor (offset/limit/total) → StoryCursor / EpicCursor
"""

from pivotal_client.config import get_config, set_config, load_config, Config
from pivotal_client.client import Client, Response, Pagination
from pivotal_client.cursors import (
    Cursor,
    ListRequest,
    PAGE_LIMIT,
    FETCH_ALL,
    TypedCursor,
    StoryCursor,
    EpicCursor,
    NextResult,
    Outcome,
)
from pivotal_client.models import (
    Story,
    StoryRequest,
    StoryType,
    StoryState,
    Epic,
    EpicRequest,
    Label,
    Task,
    Person,
    Comment,
    Blocker,
    BlockerRequest,
)
from pivotal_client.services import StoryService, EpicService
from pivotal_client.utils import (
    get_logger,
    setup_file_logging,
    PivotalClientError,
    TransportError,
    NetworkTimeoutError,
    PivotalAPIError,
    AuthenticationError,
    NotFoundError,
    RateLimitExceededError,
    DecodeError,
    ValidationError,
    FieldNotSetError,
    CursorError,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "get_config",
    "set_config",
    "load_config",
    "Config",

    # Transport
    "Client",
    "Response",
    "Pagination",

    # Cursors
    "Cursor",
    "ListRequest",
    "PAGE_LIMIT",
    "FETCH_ALL",
    "TypedCursor",
    "StoryCursor",
    "EpicCursor",
    "NextResult",
    "Outcome",

    # Records
    "Story",
    "StoryRequest",
    "StoryType",
    "StoryState",
    "Epic",
    "EpicRequest",
    "Label",
    "Task",
    "Person",
    "Comment",
    "Blocker",
    "BlockerRequest",

    # Services
    "StoryService",
    "EpicService",

    # Utils
    "get_logger",
    "setup_file_logging",
    "PivotalClientError",
    "TransportError",
    "NetworkTimeoutError",
    "PivotalAPIError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitExceededError",
    "DecodeError",
    "ValidationError",
    "FieldNotSetError",
    "CursorError",
]
