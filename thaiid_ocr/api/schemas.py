from pydantic import BaseModel, ConfigDict, Field

from ..core.types import CardRecord


class OCRRequest(BaseModel):
    image_uri: str = Field(alias="imageUri", min_length=1)


class CardRecordResponse(BaseModel):
    id_card_number: str = Field("", alias="idCardNumber")
    name: str = ""
    last_name: str = Field("", alias="lastName")
    date_of_birth: str = Field("", alias="dateOfBirth")
    address: str = ""
    date_of_issue: str = Field("", alias="dateOfIssue")
    date_of_expiry: str = Field("", alias="dateOfExpiry")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_record(cls, record: CardRecord) -> "CardRecordResponse":
        return cls.model_validate(record.to_dict())


class ErrorResponse(BaseModel):
    detail: str
