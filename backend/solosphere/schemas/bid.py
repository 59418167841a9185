from pydantic import BaseModel


class BidStatusUpdate(BaseModel):
    # Free-form lifecycle state, e.g. "pending", "accepted", "rejected".
    status: str | None = None
