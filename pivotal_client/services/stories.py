"""
Story service: listing, iteration and story-scoped resources
(tasks, owners, comments, blockers, labels).
"""

from typing import List, Optional, Sequence, TYPE_CHECKING

from pivotal_client.cursors.cursor import Cursor, ListRequest, FETCH_ALL
from pivotal_client.cursors.typed import StoryCursor
from pivotal_client.models.common import Blocker, BlockerRequest, Comment, Label, Person, Task
from pivotal_client.models.story import Story, StoryRequest
from pivotal_client.utils.exceptions import FieldNotSetError
from pivotal_client.utils.logging_config import get_logger

if TYPE_CHECKING:
    from pivotal_client.client import Client

logger = get_logger("stories")


class StoryService:
    """Stories of a project."""

    def __init__(self, client: "Client"):
        self._client = client

    def _list_request(self, project_id: int, filter: str) -> ListRequest:
        return ListRequest(self._client, f"projects/{project_id}/stories", filter)

    def list(self, project_id: int, filter: str = "") -> List[Story]:
        """
        Return all stories matching the filter.

        Sends one request to learn the total number of matching stories and
        then fetches them with a page large enough to hold all of them.
        Filtered results are not reliably sorted by the server, so paging
        through them in small chunks can skip or repeat stories.

        Args:
            project_id: Project ID
            filter: Tracker search filter, e.g. "state:started label:api"

        Returns:
            Stories in the order the server returned them
        """
        cursor = Cursor(self._client, self._list_request(project_id, filter), Story.from_list, FETCH_ALL)
        stories = cursor.all()
        logger.info(f"Listed {len(stories)} stories in project {project_id}")
        return stories

    def iterate(self, project_id: int, filter: str = "") -> StoryCursor:
        """
        Return a cursor over the stories matching the filter.

        Stories are fetched page by page as the cursor is advanced; no
        request is sent until the first next().
        """
        cursor = Cursor(
            self._client,
            self._list_request(project_id, filter),
            Story.from_list,
            self._client.page_limit,
        )
        return StoryCursor(cursor)

    def create(self, project_id: int, story: StoryRequest) -> Optional[Story]:
        """Create a story; None when the server answers without a body."""
        if not project_id:
            raise FieldNotSetError("project_id")
        if not story.name:
            raise FieldNotSetError("name")

        req = self._client.new_request("POST", f"projects/{project_id}/stories", story)
        created = self._client.do(req, Story.from_dict).data
        if created is not None:
            logger.info(f"Created story {created.id} in project {project_id}")
        return created

    def get(self, project_id: int, story_id: int) -> Story:
        req = self._client.new_request("GET", f"projects/{project_id}/stories/{story_id}")
        return self._client.do(req, Story.from_dict).data

    def get_bulk(self, project_id: int, story_ids: Sequence[int]) -> List[Story]:
        """Fetch several stories by ID in one request."""
        params = None
        if story_ids:
            params = {"ids": ",".join(str(story_id) for story_id in story_ids)}
        req = self._client.new_request("GET", f"projects/{project_id}/stories/bulk", params=params)
        return self._client.do(req, Story.from_list).data or []

    def update(self, project_id: int, story_id: int, story: StoryRequest) -> Story:
        req = self._client.new_request("PUT", f"projects/{project_id}/stories/{story_id}", story)
        return self._client.do(req, Story.from_dict).data

    def list_tasks(self, project_id: int, story_id: int) -> List[Task]:
        req = self._client.new_request("GET", f"projects/{project_id}/stories/{story_id}/tasks")
        return self._client.do(req, Task.from_list).data or []

    def add_task(self, project_id: int, story_id: int, task: Task) -> Task:
        if not task.description:
            raise FieldNotSetError("description")

        req = self._client.new_request("POST", f"projects/{project_id}/stories/{story_id}/tasks", task)
        return self._client.do(req, Task.from_dict).data

    def list_owners(self, project_id: int, story_id: int) -> List[Person]:
        req = self._client.new_request("GET", f"projects/{project_id}/stories/{story_id}/owners")
        return self._client.do(req, Person.from_list).data or []

    def add_comment(self, project_id: int, story_id: int, comment: Comment) -> Comment:
        req = self._client.new_request("POST", f"projects/{project_id}/stories/{story_id}/comments", comment)
        return self._client.do(req, Comment.from_dict).data

    def list_comments(self, project_id: int, story_id: int) -> List[Comment]:
        """Return the comments on a story."""
        req = self._client.new_request("GET", f"projects/{project_id}/stories/{story_id}/comments")
        return self._client.do(req, Comment.from_list).data or []

    def list_blockers(self, project_id: int, story_id: int) -> List[Blocker]:
        """Return the blockers on a story."""
        req = self._client.new_request("GET", f"projects/{project_id}/stories/{story_id}/blockers")
        return self._client.do(req, Blocker.from_list).data or []

    def add_blocker(self, project_id: int, story_id: int, description: str) -> Blocker:
        req = self._client.new_request(
            "POST",
            f"projects/{project_id}/stories/{story_id}/blockers",
            BlockerRequest(description=description),
        )
        return self._client.do(req, Blocker.from_dict).data

    def update_blocker(
        self,
        project_id: int,
        story_id: int,
        blocker_id: int,
        blocker: BlockerRequest,
    ) -> Blocker:
        req = self._client.new_request(
            "PUT",
            f"projects/{project_id}/stories/{story_id}/blockers/{blocker_id}",
            blocker,
        )
        return self._client.do(req, Blocker.from_dict).data

    def list_labels(self, project_id: int, story_id: int) -> List[Label]:
        req = self._client.new_request("GET", f"projects/{project_id}/stories/{story_id}/labels")
        return self._client.do(req, Label.from_list).data or []

    def add_label(self, project_id: int, story_id: int, name: Optional[str]) -> Label:
        """Attach a label to a story, creating the label in the project if needed."""
        if not name:
            raise FieldNotSetError("name")

        req = self._client.new_request(
            "POST",
            f"projects/{project_id}/stories/{story_id}/labels",
            Label(name=name),
        )
        return self._client.do(req, Label.from_dict).data
