import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.database import get_table
from app.routers import health, pages, tasks
from app.services.task_service import TaskStoreError

logging.basicConfig(level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Client DynamoDB construit au démarrage: credentials invalides = pas de boot
    get_table()
    yield


app = FastAPI(
    title="Task Tracker",
    version="1.0.0",
    lifespan=lifespan
)


# Une requête en échec ne doit pas faire tomber le serveur
# (l'erreur est déjà loggée par TaskRepository)
@app.exception_handler(TaskStoreError)
def task_store_error_handler(request: Request, exc: TaskStoreError):
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Task store unavailable"}
    )


# Routes
app.include_router(health.router, prefix="/health")
app.include_router(pages.router)
app.include_router(tasks.router)


def run():
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
