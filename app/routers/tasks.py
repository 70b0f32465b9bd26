from fastapi import APIRouter, Depends, status
from typing import List, Union
import logging

from app.core.database import get_table
from app.models.task import Task, new_task_id
from app.schemas.task import TaskCreate, TaskUpdate, TaskResponse
from app.services.task_service import TaskRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])

EMPTY_TABLE_MESSAGE = "No tasks found."


def get_repository(table=Depends(get_table)) -> TaskRepository:
    return TaskRepository(table)


@router.post("/Add", response_model=str, status_code=status.HTTP_201_CREATED)
def add_task(task_data: TaskCreate, repo: TaskRepository = Depends(get_repository)):
    new_task = Task(
        TaskID=new_task_id(),
        TaskName=task_data.TaskName,
        TaskDetails=task_data.TaskDetails,
        CompletionDate=task_data.CompletionDate
    )
    repo.put_task(new_task)
    return f"Task added with TaskID: {new_task.TaskID}"


@router.get("/ViewAll", response_model=Union[List[TaskResponse], str])
def view_all(repo: TaskRepository = Depends(get_repository)):
    tasks = repo.list_tasks()
    if not tasks:
        return EMPTY_TABLE_MESSAGE
    return tasks


@router.post("/Modify", response_model=TaskResponse)
def modify_task(task_data: TaskUpdate, repo: TaskRepository = Depends(get_repository)):
    # Écrase entièrement l'enregistrement existant (pas de merge)
    task = Task(**task_data.model_dump())
    repo.put_task(task)
    return task


@router.delete("/Delete/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, repo: TaskRepository = Depends(get_repository)):
    repo.delete_task(task_id)
