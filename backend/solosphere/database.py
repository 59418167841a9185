from urllib.parse import quote_plus

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.server_api import ServerApi

from solosphere.config import settings


def mongodb_uri() -> str:
    if settings.mongodb_uri:
        return settings.mongodb_uri
    if settings.db_user:
        return (
            f"mongodb+srv://{quote_plus(settings.db_user)}:{quote_plus(settings.db_pass or '')}"
            f"@{settings.db_cluster}/?retryWrites=true&w=majority"
        )
    return "mongodb://localhost:27017"


def get_client(uri: str | None = None) -> MongoClient:
    # The client connects lazily, so building it at import time is cheap.
    return MongoClient(
        uri or mongodb_uri(),
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )


client = get_client()


def get_db() -> Database:
    return client[settings.database_name]


def ping(mongo_client: MongoClient | None = None) -> bool:
    result = (mongo_client or client).admin.command("ping")
    return result.get("ok") == 1
