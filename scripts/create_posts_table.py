import logging
import sys

from botocore.exceptions import BotoCoreError, ClientError

from posts_service import config
from posts_service.db import create_dynamodb_client
from posts_service.logging_config import setup_logging


logger = logging.getLogger("create_posts_table")


def create_posts_table(client, table_name: str) -> bool:
    """Create the posts table unless it exists. Returns True when a table was created."""
    existing = []
    for page in client.get_paginator("list_tables").paginate():
        existing.extend(page.get("TableNames", []))
    if table_name in existing:
        logger.info("Table %s already exists", table_name)
        return False

    client.create_table(
        TableName=table_name,
        KeySchema=[
            {"AttributeName": "id", "KeyType": "HASH"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "id", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    client.get_waiter("table_exists").wait(TableName=table_name)
    logger.info("Created table %s", table_name)
    return True


def main():
    setup_logging(config.LOG_LEVEL)
    try:
        create_posts_table(create_dynamodb_client(), config.POSTS_TABLE)
    except (BotoCoreError, ClientError) as e:
        logger.error("Could not create table %s: %s", config.POSTS_TABLE, e)
        sys.exit(1)


if __name__ == "__main__":
    main()
