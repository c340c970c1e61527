"""
Epic service.
"""

from typing import List, Optional, TYPE_CHECKING

from pivotal_client.cursors.cursor import Cursor, ListRequest, FETCH_ALL
from pivotal_client.cursors.typed import EpicCursor
from pivotal_client.models.epic import Epic, EpicRequest
from pivotal_client.utils.exceptions import FieldNotSetError
from pivotal_client.utils.logging_config import get_logger

if TYPE_CHECKING:
    from pivotal_client.client import Client

logger = get_logger("epics")


class EpicService:
    """Epics of a project."""

    def __init__(self, client: "Client"):
        self._client = client

    def _list_request(self, project_id: int, filter: str) -> ListRequest:
        return ListRequest(self._client, f"projects/{project_id}/epics", filter)

    def list(self, project_id: int, filter: str = "") -> List[Epic]:
        """
        Return all epics matching the filter.

        Like StoryService.list, this sizes the request from the reported
        total first because filtered epics come back unsorted.
        """
        cursor = Cursor(self._client, self._list_request(project_id, filter), Epic.from_list, FETCH_ALL)
        epics = cursor.all()
        logger.info(f"Listed {len(epics)} epics in project {project_id}")
        return epics

    def iterate(self, project_id: int, filter: str = "") -> EpicCursor:
        """Return a cursor over the epics matching the filter, fetched on demand."""
        cursor = Cursor(
            self._client,
            self._list_request(project_id, filter),
            Epic.from_list,
            self._client.page_limit,
        )
        return EpicCursor(cursor)

    def create(self, project_id: int, epic: EpicRequest) -> Optional[Epic]:
        if not project_id:
            raise FieldNotSetError("project_id")
        if not epic.name:
            raise FieldNotSetError("name")

        req = self._client.new_request("POST", f"projects/{project_id}/epics", epic)
        created = self._client.do(req, Epic.from_dict).data
        if created is not None:
            logger.info(f"Created epic {created.id} in project {project_id}")
        return created

    def get(self, project_id: int, epic_id: int) -> Epic:
        req = self._client.new_request("GET", f"projects/{project_id}/epics/{epic_id}")
        return self._client.do(req, Epic.from_dict).data

    def update(self, project_id: int, epic_id: int, epic: EpicRequest) -> Epic:
        req = self._client.new_request("PUT", f"projects/{project_id}/epics/{epic_id}", epic)
        return self._client.do(req, Epic.from_dict).data
