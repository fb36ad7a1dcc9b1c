# Standard library imports
from datetime import UTC, datetime
import enum
import secrets
import string
import time

# Third-party imports
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer, model_validator
from pydantic.alias_generators import to_camel

BASE36_ALPHABET = string.digits + string.ascii_lowercase
ID_PREFIX = "c_"
ID_RANDOM_LENGTH = 6


class IssueType(str, enum.Enum):
    ROAD = "Road"
    STREET_LIGHT = "Street Light"
    WATER = "Water"
    GARBAGE = "Garbage"
    OTHER = "Other"


class ComplaintStatus(str, enum.Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"


def utc_now() -> datetime:
    """Current UTC time truncated to millisecond precision."""
    now = datetime.now(UTC)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def to_base36(number: int) -> str:
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def generate_complaint_id() -> str:
    """
    Time-based prefix plus random suffix, e.g. ``c_m1x2y3z4a9k2qp``.

    Not globally unique; the store regenerates on collision.
    """
    millis = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(BASE36_ALPHABET) for _ in range(ID_RANDOM_LENGTH))
    return f"{ID_PREFIX}{to_base36(millis)}{suffix}"


class Complaint(BaseModel):
    """
    A citizen-submitted issue report as held by the complaint store.

    Serialized with camelCase keys, which is also the on-disk format.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # Older data files key the id as "_id"
    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    name: str = ""
    issue_type: IssueType
    title: str
    description: str
    location: str
    status: ComplaintStatus = ComplaintStatus.PENDING
    upvotes: int = Field(default=0, ge=0)
    upvoters: list[str] = Field(default_factory=list)
    photo_data: str | None = None
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def normalize_upvoters(self) -> "Complaint":
        # Naive timestamps in older data files are UTC
        if self.created_at.tzinfo is None:
            self.created_at = self.created_at.replace(tzinfo=UTC)
        if self.updated_at.tzinfo is None:
            self.updated_at = self.updated_at.replace(tzinfo=UTC)
        # Upvoters behave as a set; the count is always derived from it
        self.upvoters = list(dict.fromkeys(self.upvoters))
        self.upvotes = len(self.upvoters)
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at
        return self

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def has_upvoted(self, address: str) -> bool:
        return address in self.upvoters

    def add_upvoter(self, address: str, at: datetime | None = None) -> bool:
        """Record an upvote; returns False when the address already voted."""
        if self.has_upvoted(address):
            return False
        self.upvoters.append(address)
        self.upvotes = len(self.upvoters)
        self.updated_at = at or utc_now()
        return True

    def set_status(self, status: ComplaintStatus, at: datetime | None = None) -> None:
        self.status = status
        self.updated_at = at or utc_now()
