"""
Resource records for the Pivotal Tracker API.
"""

from pivotal_client.models.base import Record, parse_timestamp, format_timestamp
from pivotal_client.models.common import (
    Label,
    Task,
    Person,
    Comment,
    Blocker,
    BlockerRequest,
)
from pivotal_client.models.story import Story, StoryRequest, StoryType, StoryState
from pivotal_client.models.epic import Epic, EpicRequest

__all__ = [
    "Record",
    "parse_timestamp",
    "format_timestamp",
    "Label",
    "Task",
    "Person",
    "Comment",
    "Blocker",
    "BlockerRequest",
    "Story",
    "StoryRequest",
    "StoryType",
    "StoryState",
    "Epic",
    "EpicRequest",
]
