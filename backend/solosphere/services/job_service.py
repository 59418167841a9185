from pymongo.collection import Collection
from pymongo.database import Database

JOBS = "jobs"


def jobs_collection(db: Database) -> Collection:
    return db[JOBS]


def build_search_query(search: str | None = None, category: str | None = None) -> dict:
    # A missing search term matches every job that has a title.
    query: dict = {"title": {"$regex": search or "", "$options": "i"}}
    if category:
        query["category"] = category
    return query


def build_deadline_sort(sort: str | None) -> list[tuple[str, int]] | None:
    if not sort:
        return None
    return [("deadline", 1 if sort == "asc" else -1)]


def poster_query(email: str) -> dict:
    return {"buyer.email": email}
