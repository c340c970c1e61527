"""
Epic records.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from pivotal_client.models.base import Record, json_field
from pivotal_client.models.common import Comment, Label, Person


@dataclass
class Epic(Record):
    id: Optional[int] = None
    project_id: Optional[int] = None
    name: Optional[str] = None
    label_id: Optional[int] = None
    label: Optional[Label] = json_field(model=Label)
    description: Optional[str] = None
    comment_ids: Optional[List[int]] = None
    follower_ids: Optional[List[int]] = None
    created_at: Optional[datetime] = json_field(timestamp=True)
    updated_at: Optional[datetime] = json_field(timestamp=True)
    after_id: Optional[int] = None
    before_id: Optional[int] = None
    url: Optional[str] = None
    completed_at: Optional[datetime] = json_field(timestamp=True)
    kind: Optional[str] = None


@dataclass
class EpicRequest(Record):
    """Body for creating or updating an epic."""
    project_id: Optional[int] = None
    name: Optional[str] = None
    label: Optional[Label] = json_field(model=Label)
    label_id: Optional[int] = None
    description: Optional[str] = None
    comments: Optional[List[Comment]] = json_field(model=Comment)
    comment_ids: Optional[List[int]] = None
    followers: Optional[List[Person]] = json_field(model=Person)
    follower_ids: Optional[List[int]] = None
    after_id: Optional[int] = None
    before_id: Optional[int] = None
