import logging

from pymongo.collection import Collection
from pymongo.database import Database

from solosphere.schemas.results import InsertResult
from solosphere.services.job_service import jobs_collection
from solosphere.services.store import insert_result, parse_object_id

logger = logging.getLogger(__name__)

BIDS = "bids"


def bids_collection(db: Database) -> Collection:
    return db[BIDS]


class BidAlreadyExists(Exception):
    pass


def place_bid(db: Database, bid: dict) -> InsertResult:
    """Store a bid and bump the parent job's ``bid_count``.

    The existence check, the insert and the increment are separate writes.
    Two identical bids submitted concurrently can both pass the check, and a
    failure after the insert leaves ``bid_count`` one short.
    """
    bids = bids_collection(db)
    existing = bids.find_one({"email": bid.get("email"), "jobId": bid.get("jobId")})
    if existing:
        logger.info("Rejected duplicate bid by %s on job %s", bid.get("email"), bid.get("jobId"))
        raise BidAlreadyExists("You have already placed a bid for this job.")

    job_id = parse_object_id(bid.get("jobId"))
    document = {k: v for k, v in bid.items() if k != "_id"}
    result = bids.insert_one(document)
    jobs_collection(db).update_one({"_id": job_id}, {"$inc": {"bid_count": 1}})
    return insert_result(result)


def bids_query(email: str, as_buyer: bool = False) -> dict:
    return {"buyer": email} if as_buyer else {"email": email}
