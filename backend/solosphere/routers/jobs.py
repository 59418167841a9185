from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from pymongo.database import Database

from solosphere.database import get_db
from solosphere.schemas.results import DeleteResult, InsertResult, UpdateResult
from solosphere.services.job_service import (
    build_deadline_sort,
    build_search_query,
    jobs_collection,
    poster_query,
)
from solosphere.services.store import (
    InvalidId,
    delete_result,
    insert_result,
    parse_object_id,
    serialize,
    serialize_many,
    update_result,
)

router = APIRouter(tags=["jobs"])


def _job_id(raw: str):
    try:
        return parse_object_id(raw)
    except InvalidId as exc:
        raise HTTPException(status_code=404, detail="Job not found") from exc


@router.post("/add-job", response_model=InsertResult)
async def create_job(job: dict[str, Any] = Body(...), db: Database = Depends(get_db)):
    document = {k: v for k, v in job.items() if k != "_id"}
    return insert_result(jobs_collection(db).insert_one(document))


@router.get("/jobs")
async def list_jobs(db: Database = Depends(get_db)) -> list[dict[str, Any]]:
    return serialize_many(jobs_collection(db).find())


@router.get("/all-jobs")
async def search_jobs(
    category: str | None = Query(None, alias="filter"),
    search: str | None = None,
    sort: str | None = None,
    db: Database = Depends(get_db),
) -> list[dict[str, Any]]:
    # A malformed pattern is rejected by the store and surfaces as a 500.
    cursor = jobs_collection(db).find(build_search_query(search, category))
    order = build_deadline_sort(sort)
    if order:
        cursor = cursor.sort(order)
    return serialize_many(cursor)


@router.get("/jobs/{email}")
async def list_jobs_by_poster(email: str, db: Database = Depends(get_db)) -> list[dict[str, Any]]:
    return serialize_many(jobs_collection(db).find(poster_query(email)))


@router.get("/job/{job_id}")
async def get_job(job_id: str, db: Database = Depends(get_db)) -> dict[str, Any] | None:
    return serialize(jobs_collection(db).find_one({"_id": _job_id(job_id)}))


@router.delete("/job/{job_id}", response_model=DeleteResult)
async def delete_job(job_id: str, db: Database = Depends(get_db)):
    # Bids referencing this job are left in place.
    return delete_result(jobs_collection(db).delete_one({"_id": _job_id(job_id)}))


@router.put("/update-job/{job_id}", response_model=UpdateResult)
async def update_job(job_id: str, job: dict[str, Any] = Body(...), db: Database = Depends(get_db)):
    fields = {k: v for k, v in job.items() if k != "_id"}
    result = jobs_collection(db).update_one(
        {"_id": _job_id(job_id)}, {"$set": fields}, upsert=True,
    )
    return update_result(result)
