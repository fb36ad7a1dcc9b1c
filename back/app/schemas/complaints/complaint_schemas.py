# Third-party imports
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Local application imports
from app.models.complaints import ComplaintStatus, IssueType

NAME_MAX_LENGTH = 80
PHOTO_DATA_MAX_LENGTH = 5_000_000


class ComplaintCreate(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        json_schema_extra={
            "example": {
                "name": "Asha",
                "issueType": "Road",
                "title": "Pothole on Main St",
                "description": "Large pothole causing traffic issues",
                "location": "Main St & 5th",
            }
        },
    )

    name: str | None = Field(None, max_length=NAME_MAX_LENGTH)
    issue_type: IssueType
    title: str = Field(..., min_length=5, max_length=120)
    description: str = Field(..., min_length=10, max_length=1000)
    location: str = Field(..., min_length=3, max_length=200)
    photo_data: str | None = Field(None, max_length=PHOTO_DATA_MAX_LENGTH)


class ComplaintStatusUpdate(BaseModel):
    model_config = {"json_schema_extra": {"example": {"status": "In Progress"}}}

    status: ComplaintStatus
