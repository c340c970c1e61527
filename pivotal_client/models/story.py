"""
Story records.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional, Union

from pivotal_client.models.base import Record, json_field
from pivotal_client.models.common import Label, Task


class StoryType(str, Enum):
    """Story type (story_type)."""
    FEATURE = "feature"
    BUG = "bug"
    CHORE = "chore"
    RELEASE = "release"


class StoryState(str, Enum):
    """Story workflow state (current_state)."""
    UNSCHEDULED = "unscheduled"
    PLANNED = "planned"
    UNSTARTED = "unstarted"
    STARTED = "started"
    FINISHED = "finished"
    DELIVERED = "delivered"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass
class Story(Record):
    id: Optional[int] = None
    project_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[Union[StoryType, str]] = json_field("story_type")
    state: Optional[Union[StoryState, str]] = json_field("current_state")
    estimate: Optional[float] = None
    accepted_at: Optional[datetime] = json_field(timestamp=True)
    deadline: Optional[datetime] = json_field(timestamp=True)
    requested_by_id: Optional[int] = None
    owner_ids: Optional[List[int]] = None
    label_ids: Optional[List[int]] = None
    labels: Optional[List[Label]] = json_field(model=Label)
    task_ids: Optional[List[int]] = None
    tasks: Optional[List[Task]] = json_field(model=Task)
    follower_ids: Optional[List[int]] = None
    comment_ids: Optional[List[int]] = None
    created_at: Optional[datetime] = json_field(timestamp=True)
    updated_at: Optional[datetime] = json_field(timestamp=True)
    integration_id: Optional[int] = None
    external_id: Optional[str] = None
    url: Optional[str] = None


@dataclass
class StoryRequest(Record):
    """
    Body for creating or updating a story.

    Unset (None) fields are left out of the request, so an empty list
    clears the corresponding collection on update.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[Union[StoryType, str]] = json_field("story_type")
    state: Optional[Union[StoryState, str]] = json_field("current_state")
    estimate: Optional[float] = None
    owner_ids: Optional[List[int]] = None
    label_ids: Optional[List[int]] = None
    labels: Optional[List[Label]] = json_field(model=Label)
    task_ids: Optional[List[int]] = None
    tasks: Optional[List[Task]] = json_field(model=Task)
    follower_ids: Optional[List[int]] = None
    comment_ids: Optional[List[int]] = None
