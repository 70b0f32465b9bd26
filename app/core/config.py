from os import getenv

class Settings:
    AWS_REGION = getenv("AWS_REGION", "eu-west-2")
    TASK_TABLE_NAME = getenv("TASK_TABLE_NAME", "Task-Tracker")
    DYNAMODB_ENDPOINT_URL = getenv("DYNAMODB_ENDPOINT_URL")  # ex: DynamoDB Local en dev

    # Credentials depuis SSM Parameter Store, sinon chaîne par défaut de boto3
    USE_SSM_CREDENTIALS = getenv("USE_SSM_CREDENTIALS", "false").lower() == "true"
    SSM_ACCESS_KEY_PARAM = getenv("SSM_ACCESS_KEY_PARAM", "/task-tracker/access-key-id")
    SSM_SECRET_KEY_PARAM = getenv("SSM_SECRET_KEY_PARAM", "/task-tracker/secret-access-key")

    LOG_LEVEL = getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
