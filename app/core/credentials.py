"""Credential provider backed by AWS SSM Parameter Store."""

import logging
from typing import NamedTuple, Optional

import boto3

logger = logging.getLogger(__name__)


class CredentialsError(Exception):
    """Raised when a credential parameter is missing from the store."""


class AWSCredentials(NamedTuple):
    access_key_id: str
    secret_access_key: str


def fetch_credentials(
    access_key_param: str,
    secret_key_param: str,
    region: str,
    ssm_client: Optional[object] = None,
) -> AWSCredentials:
    # Toujours un fetch frais, pas de cache ni de retry
    client = ssm_client or boto3.client("ssm", region_name=region)
    response = client.get_parameters(
        Names=[access_key_param, secret_key_param],
        WithDecryption=True,
    )

    missing = response.get("InvalidParameters", [])
    if missing:
        logger.error(f"Missing credential parameters: {missing}")
        raise CredentialsError(f"Parameters not found: {', '.join(missing)}")

    values = {p["Name"]: p["Value"] for p in response.get("Parameters", [])}
    for name in (access_key_param, secret_key_param):
        if name not in values:
            raise CredentialsError(f"Parameters not found: {name}")

    return AWSCredentials(
        access_key_id=values[access_key_param],
        secret_access_key=values[secret_key_param],
    )
