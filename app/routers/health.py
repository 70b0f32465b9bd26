from fastapi import APIRouter

from app.core.config import settings

router = APIRouter(tags=["health"])

@router.get("/z")
def healthz():
    # Liveness uniquement: pas d'appel à DynamoDB
    return {"status": "ok", "table": settings.TASK_TABLE_NAME}
