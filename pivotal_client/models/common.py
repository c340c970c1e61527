"""
Records shared by stories and epics: labels, tasks, people, comments, blockers.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from pivotal_client.models.base import Record, json_field


@dataclass
class Label(Record):
    id: Optional[int] = None
    project_id: Optional[int] = None
    name: Optional[str] = None
    created_at: Optional[datetime] = json_field(timestamp=True)
    updated_at: Optional[datetime] = json_field(timestamp=True)
    kind: Optional[str] = None


@dataclass
class Task(Record):
    id: Optional[int] = None
    story_id: Optional[int] = None
    description: Optional[str] = None
    position: Optional[int] = None
    complete: Optional[bool] = None
    created_at: Optional[datetime] = json_field(timestamp=True)
    updated_at: Optional[datetime] = json_field(timestamp=True)


@dataclass
class Person(Record):
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    initials: Optional[str] = None
    username: Optional[str] = None
    kind: Optional[str] = None


@dataclass
class Comment(Record):
    id: Optional[int] = None
    story_id: Optional[int] = None
    epic_id: Optional[int] = None
    person_id: Optional[int] = None
    text: Optional[str] = None
    file_attachment_ids: Optional[List[int]] = None
    google_attachment_ids: Optional[List[int]] = None
    commit_type: Optional[str] = None
    commit_identifier: Optional[str] = None
    created_at: Optional[datetime] = json_field(timestamp=True)
    updated_at: Optional[datetime] = json_field(timestamp=True)


@dataclass
class Blocker(Record):
    id: Optional[int] = None
    story_id: Optional[int] = None
    person_id: Optional[int] = None
    description: Optional[str] = None
    resolved: Optional[bool] = None
    created_at: Optional[datetime] = json_field(timestamp=True)
    updated_at: Optional[datetime] = json_field(timestamp=True)


@dataclass
class BlockerRequest(Record):
    """Body for creating or updating a blocker. ``resolved=False`` is sent as-is."""
    description: Optional[str] = None
    resolved: Optional[bool] = None
