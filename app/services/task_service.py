"""Task service"""

import logging
from typing import Any, Dict, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from app.models.task import ITEM_TASK_ID, Task

logger = logging.getLogger(__name__)


class TaskStoreError(Exception):
    """Raised when the remote table rejects or fails an operation."""


class TaskRepository:
    def __init__(self, table):
        self.table = table

    def list_tasks(self) -> List[Task]:
        # Scan complet: on suit LastEvaluatedKey jusqu'à la dernière page
        tasks: List[Task] = []
        start_key: Optional[Dict[str, Any]] = None
        while True:
            kwargs: Dict[str, Any] = {}
            if start_key:
                kwargs["ExclusiveStartKey"] = start_key
            try:
                page = self.table.scan(**kwargs)
            except (ClientError, BotoCoreError) as e:
                logger.error(f"Scan failed: {e}")
                raise TaskStoreError(f"Could not list tasks: {e}") from e

            tasks.extend(Task.from_item(item) for item in page.get("Items", []))
            start_key = page.get("LastEvaluatedKey")
            if not start_key:
                break
        return tasks

    def put_task(self, task: Task) -> None:
        # Pas de vérif d'existence: création et mise à jour = même opération
        try:
            self.table.put_item(Item=task.to_item())
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Put failed for task {task.TaskID}: {e}")
            raise TaskStoreError(f"Could not save task {task.TaskID}: {e}") from e
        logger.info(f"Task {task.TaskID} saved")

    def delete_task(self, task_id: str) -> None:
        # Supprimer un id absent ne lève pas d'erreur côté DynamoDB
        try:
            self.table.delete_item(Key={ITEM_TASK_ID: task_id})
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Delete failed for task {task_id}: {e}")
            raise TaskStoreError(f"Could not delete task {task_id}: {e}") from e
        logger.info(f"Task {task_id} deleted")
