from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from pymongo.database import Database

from solosphere.database import get_db
from solosphere.dependencies import require_session
from solosphere.schemas.bid import BidStatusUpdate
from solosphere.schemas.results import InsertResult, UpdateResult
from solosphere.services.bid_service import (
    BidAlreadyExists,
    bids_collection,
    bids_query,
    place_bid,
)
from solosphere.services.store import InvalidId, parse_object_id, serialize_many, update_result

router = APIRouter(tags=["bids"])


@router.post("/add-bid", response_model=InsertResult)
async def create_bid(bid: dict[str, Any] = Body(...), db: Database = Depends(get_db)):
    try:
        return place_bid(db, bid)
    except BidAlreadyExists as exc:
        return PlainTextResponse(str(exc), status_code=400)
    except InvalidId as exc:
        raise HTTPException(status_code=404, detail="Job not found") from exc


@router.get("/bids/{email}")
async def list_bids(
    email: str,
    buyer: str | None = None,
    identity: dict = Depends(require_session),
    db: Database = Depends(get_db),
) -> list[dict[str, Any]]:
    # Any non-empty ``buyer`` value selects the job-owner view.
    if identity.get("email") != email:
        raise HTTPException(status_code=403, detail="forbidden access")
    return serialize_many(bids_collection(db).find(bids_query(email, as_buyer=bool(buyer))))


@router.patch("/bid-status-update/{bid_id}", response_model=UpdateResult)
async def update_bid_status(bid_id: str, req: BidStatusUpdate, db: Database = Depends(get_db)):
    try:
        query = {"_id": parse_object_id(bid_id)}
    except InvalidId as exc:
        raise HTTPException(status_code=404, detail="Bid not found") from exc
    return update_result(bids_collection(db).update_one(query, {"$set": {"status": req.status}}))
