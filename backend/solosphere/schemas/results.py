from pydantic import BaseModel, ConfigDict, Field


class InsertResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    inserted_id: str = Field(alias="insertedId")


class UpdateResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    matched_count: int = Field(0, alias="matchedCount")
    modified_count: int = Field(0, alias="modifiedCount")
    upserted_count: int = Field(0, alias="upsertedCount")
    upserted_id: str | None = Field(None, alias="upsertedId")


class DeleteResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    deleted_count: int = Field(0, alias="deletedCount")


class SuccessResponse(BaseModel):
    success: bool = True
