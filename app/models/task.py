"""Task model"""

import uuid
from typing import Any, Dict

from pydantic import BaseModel

# Noms des attributs côté table DynamoDB
ITEM_TASK_ID = "TaskID"
ITEM_TASK_NAME = "Task Name"
ITEM_TASK_DETAILS = "Task Details"
ITEM_COMPLETION_DATE = "Completion Date"


def new_task_id() -> str:
    return str(uuid.uuid4())


class Task(BaseModel):
    TaskID: str
    TaskName: str
    TaskDetails: str
    CompletionDate: str

    def to_item(self) -> Dict[str, str]:
        return {
            ITEM_TASK_ID: self.TaskID,
            ITEM_TASK_NAME: self.TaskName,
            ITEM_TASK_DETAILS: self.TaskDetails,
            ITEM_COMPLETION_DATE: self.CompletionDate,
        }

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "Task":
        # Un attribut absent de l'item devient une chaîne vide
        return cls(
            TaskID=str(item[ITEM_TASK_ID]),
            TaskName=str(item.get(ITEM_TASK_NAME, "")),
            TaskDetails=str(item.get(ITEM_TASK_DETAILS, "")),
            CompletionDate=str(item.get(ITEM_COMPLETION_DATE, "")),
        )
