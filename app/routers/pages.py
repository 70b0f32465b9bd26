"""Pages HTML: menu, liste, ajout, modification et suppression de tâches."""

from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.templating import Jinja2Templates

from app.models.task import Task, new_task_id
from app.routers.tasks import get_repository
from app.services.task_service import TaskRepository

router = APIRouter(tags=["pages"])

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.get("/")
def menu(request: Request):
    return templates.TemplateResponse(request, "menu.html", {})


@router.get("/View")
def view_tasks(request: Request, repo: TaskRepository = Depends(get_repository)):
    tasks = repo.list_tasks()
    return templates.TemplateResponse(request, "view.html", {"tasks": tasks})


@router.get("/Add")
def add_form(request: Request):
    return templates.TemplateResponse(request, "add.html", {"created": None})


@router.post("/Add")
def add_task(
    request: Request,
    task_name: str = Form(..., alias="TaskName"),
    task_details: str = Form(..., alias="TaskDetails"),
    completion_date: str = Form(..., alias="CompletionDate"),
    repo: TaskRepository = Depends(get_repository)
):
    # On traite le POST avant le rendu pour pouvoir confirmer l'ajout
    new_task = Task(
        TaskID=new_task_id(),
        TaskName=task_name,
        TaskDetails=task_details,
        CompletionDate=completion_date
    )
    repo.put_task(new_task)
    return templates.TemplateResponse(request, "add.html", {"created": new_task})


@router.get("/Modify")
def modify_form(request: Request, repo: TaskRepository = Depends(get_repository)):
    tasks = repo.list_tasks()
    return templates.TemplateResponse(request, "modify.html", {"tasks": tasks, "updated": None})


@router.post("/Modify")
def modify_task(
    request: Request,
    task_id: str = Form(..., alias="TaskID"),
    task_name: str = Form(..., alias="TaskName"),
    task_details: str = Form(..., alias="TaskDetails"),
    completion_date: str = Form(..., alias="CompletionDate"),
    repo: TaskRepository = Depends(get_repository)
):
    task = Task(
        TaskID=task_id,
        TaskName=task_name,
        TaskDetails=task_details,
        CompletionDate=completion_date
    )
    repo.put_task(task)
    tasks = repo.list_tasks()
    return templates.TemplateResponse(request, "modify.html", {"tasks": tasks, "updated": task})


@router.get("/Delete")
def delete_form(request: Request, repo: TaskRepository = Depends(get_repository)):
    tasks = repo.list_tasks()
    return templates.TemplateResponse(request, "delete.html", {"tasks": tasks, "deleted": None})


@router.post("/Delete")
def delete_task(
    request: Request,
    task_id: str = Form(..., alias="TaskID"),
    repo: TaskRepository = Depends(get_repository)
):
    repo.delete_task(task_id)
    tasks = repo.list_tasks()
    return templates.TemplateResponse(request, "delete.html", {"tasks": tasks, "deleted": task_id})
