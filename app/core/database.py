import threading
from typing import Optional

import boto3

from app.core.config import settings
from app.core.credentials import AWSCredentials, fetch_credentials

_table = None
_table_lock = threading.Lock()


def create_table(
    region: str,
    credentials: Optional[AWSCredentials] = None,
    table_name: str = settings.TASK_TABLE_NAME,
    endpoint_url: Optional[str] = settings.DYNAMODB_ENDPOINT_URL,
):
    """Construit un client DynamoDB lié à une seule table"""
    if credentials is not None:
        session = boto3.Session(
            aws_access_key_id=credentials.access_key_id,
            aws_secret_access_key=credentials.secret_access_key,
            region_name=region,
        )
    else:
        session = boto3.Session(region_name=region)

    dynamodb = session.resource("dynamodb", endpoint_url=endpoint_url)
    return dynamodb.Table(table_name)


def get_table():
    """Dépendance table partagée (créée une seule fois pour tout le process)"""
    global _table
    with _table_lock:
        if _table is None:
            credentials = None
            if settings.USE_SSM_CREDENTIALS:
                credentials = fetch_credentials(
                    settings.SSM_ACCESS_KEY_PARAM,
                    settings.SSM_SECRET_KEY_PARAM,
                    settings.AWS_REGION,
                )
            _table = create_table(settings.AWS_REGION, credentials)
    return _table


def reset_table() -> None:
    global _table
    with _table_lock:
        _table = None
