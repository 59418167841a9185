"""Helpers shared by the jobs and bids collections.

Routes hand MongoDB results straight back to the client, so the driver's
result objects are mapped onto the MongoDB-shaped response schemas and
``ObjectId`` values are rendered as strings.
"""
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.results import DeleteResult as MongoDeleteResult
from pymongo.results import InsertOneResult, UpdateResult as MongoUpdateResult

from solosphere.schemas.results import DeleteResult, InsertResult, UpdateResult

__all__ = [
    "InvalidId",
    "parse_object_id",
    "serialize",
    "serialize_many",
    "insert_result",
    "update_result",
    "delete_result",
]


def parse_object_id(value: Any) -> ObjectId:
    """Raises ``InvalidId`` for anything that is not a 24-hex id."""
    if not isinstance(value, str):
        raise InvalidId(f"{value!r} is not a valid ObjectId")
    return ObjectId(value)


def serialize(document: dict | None) -> dict | None:
    if document is None:
        return None
    return {k: str(v) if isinstance(v, ObjectId) else v for k, v in document.items()}


def serialize_many(documents) -> list[dict]:
    return [serialize(doc) for doc in documents]


def insert_result(result: InsertOneResult) -> InsertResult:
    return InsertResult(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))


def update_result(result: MongoUpdateResult) -> UpdateResult:
    upserted_id = result.upserted_id
    return UpdateResult(
        acknowledged=result.acknowledged,
        matched_count=result.matched_count,
        modified_count=result.modified_count,
        upserted_count=1 if upserted_id is not None else 0,
        upserted_id=str(upserted_id) if upserted_id is not None else None,
    )


def delete_result(result: MongoDeleteResult) -> DeleteResult:
    return DeleteResult(acknowledged=result.acknowledged, deleted_count=result.deleted_count)
