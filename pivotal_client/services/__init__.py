"""
Resource services exposed on Client (client.stories, client.epics).
"""

from pivotal_client.services.stories import StoryService
from pivotal_client.services.epics import EpicService

__all__ = [
    "StoryService",
    "EpicService",
]
