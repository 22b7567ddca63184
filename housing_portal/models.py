"""
Pydantic models for beneficiaries, pending entries and officers.

Records travel as camelCase JSON (``beneficiaryName``, ``originalHouseId``,
``constructionDetails``) both over HTTP and inside the record store, so every
model is built from and dumped to that shape via ``from_record``/``to_record``.
"""
import math
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from housing_portal.config import CONSTRUCTION_STAGES, DEFAULT_STAGE_LABEL


class StageStatus(str, Enum):
    """Status of one construction stage."""
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    DELAYED = "Delayed"


class UpdateType(str, Enum):
    """Kind of change a pending entry proposes for an existing beneficiary."""
    EDIT = "edit"
    PROGRESS = "progress"


class PortalModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @classmethod
    def from_record(cls, data: dict):
        return cls.model_validate(data)

    def to_record(self) -> dict:
        """camelCase JSON-ready dict; unset optional values are left out."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


def _int_or_none(value):
    """Whole number from a loose form value, or None when it does not parse."""
    if value is None or isinstance(value, int):
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return int(number) if number.is_integer() else None


def _float_or_none(value):
    if value is None or isinstance(value, (int, float)) and math.isfinite(value):
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


# ── Construction and funds ───────────────────────────────────────────

class ConstructionStageRecord(PortalModel):
    status: StageStatus = StageStatus.NOT_STARTED
    completion_date: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _blank_status_is_not_started(cls, value):
        if value is None or value == "":
            return StageStatus.NOT_STARTED
        return value

    @model_validator(mode="after")
    def _completion_date_only_when_completed(self):
        if self.status != StageStatus.COMPLETED or not self.completion_date:
            self.completion_date = None
        return self


class ConstructionDetails(PortalModel):
    """The four construction stages, in weighting order."""
    foundation: ConstructionStageRecord = Field(default_factory=ConstructionStageRecord)
    walls: ConstructionStageRecord = Field(default_factory=ConstructionStageRecord)
    roof: ConstructionStageRecord = Field(default_factory=ConstructionStageRecord)
    finishing: ConstructionStageRecord = Field(default_factory=ConstructionStageRecord)

    @model_validator(mode="before")
    @classmethod
    def _fill_missing_stages(cls, data):
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def stages(self) -> List[ConstructionStageRecord]:
        return [getattr(self, name) for name in CONSTRUCTION_STAGES]

    def statuses(self) -> List[StageStatus]:
        return [stage.status for stage in self.stages()]

    @classmethod
    def not_started(cls) -> "ConstructionDetails":
        return cls()


class FundDetails(PortalModel):
    """Currency-formatted fund figures; remaining = allocated - utilized."""
    allocated: str = ""
    released: str = ""
    utilized: str = ""
    remaining: str = ""

    @field_validator("allocated", "released", "utilized", "remaining", mode="before")
    @classmethod
    def _none_is_blank(cls, value):
        return "" if value is None else value


# ── Beneficiary ──────────────────────────────────────────────────────

class Beneficiary(PortalModel):
    """Canonical accepted record for one housing unit."""
    id: int
    beneficiary_name: str = ""
    constituency: str = ""
    village: str = ""
    stage: str = DEFAULT_STAGE_LABEL
    progress: int = Field(0, ge=0, le=100)
    contact_number: str = ""
    aadhar_number: str = ""
    family_members: int = 0
    assigned_officer: str = ""
    start_date: str = ""
    expected_completion: str = ""
    remarks: str = ""
    lat: Optional[float] = None
    lng: Optional[float] = None
    images: List[str] = Field(default_factory=list)
    last_updated: str = ""
    fund_details: FundDetails = Field(default_factory=FundDetails)
    construction_details: ConstructionDetails = Field(default_factory=ConstructionDetails)

    @field_validator(
        "beneficiary_name", "constituency", "village", "contact_number", "aadhar_number",
        "assigned_officer", "start_date", "expected_completion", "remarks", "last_updated",
        mode="before",
    )
    @classmethod
    def _none_is_blank(cls, value):
        return "" if value is None else value

    @field_validator("stage", mode="before")
    @classmethod
    def _default_stage(cls, value):
        return value or DEFAULT_STAGE_LABEL

    @field_validator("progress", "family_members", mode="before")
    @classmethod
    def _blank_is_zero(cls, value):
        return 0 if value in (None, "") else value

    @field_validator("images", mode="before")
    @classmethod
    def _none_is_empty_list(cls, value):
        return [] if value is None else value

    @field_validator("fund_details", "construction_details", mode="before")
    @classmethod
    def _none_is_default(cls, value):
        return {} if value is None else value

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def _unparseable_coordinate_is_unset(cls, value):
        return _float_or_none(value)


# ── Pending entry ────────────────────────────────────────────────────

class PendingEntry(PortalModel):
    """
    A proposed creation (update_type is None) or update of a beneficiary.

    Optional attributes left as None were not supplied by the submitter.
    ``status`` is a display-only overlay and is never persisted.
    """
    id: Optional[int] = None
    update_type: Optional[UpdateType] = None
    original_house_id: Optional[int] = None
    beneficiary_name: Optional[str] = None
    constituency: Optional[str] = None
    village: Optional[str] = None
    stage: Optional[str] = None
    progress: Optional[int] = Field(None, ge=0, le=100)
    contact_number: Optional[str] = None
    aadhar_number: Optional[str] = None
    family_members: Optional[int] = None
    assigned_officer: Optional[str] = None
    start_date: Optional[str] = None
    expected_completion: Optional[str] = None
    remarks: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    images: Optional[List[str]] = None
    submitted_by: str = ""
    submitted_on: str = ""
    fund_details: Optional[FundDetails] = None
    construction_details: Optional[ConstructionDetails] = None
    status: Optional[str] = Field(None, exclude=True)

    @field_validator("update_type", mode="before")
    @classmethod
    def _normalize_update_type(cls, value):
        if value is None or value == "":
            return None
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("submitted_by", "submitted_on", mode="before")
    @classmethod
    def _none_is_blank(cls, value):
        return "" if value is None else value

    @field_validator("family_members", mode="before")
    @classmethod
    def _unparseable_family_is_unset(cls, value):
        return _int_or_none(value)

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def _unparseable_coordinate_is_unset(cls, value):
        return _float_or_none(value)

    @model_validator(mode="after")
    def _update_needs_original(self):
        if (self.update_type is None) != (self.original_house_id is None):
            raise ValueError("originalHouseId must be set if and only if updateType is set")
        return self

    @property
    def is_update(self) -> bool:
        return self.update_type is not None


class ProgressUpdateForm(PortalModel):
    """What a field officer fills in to report progress on a beneficiary."""
    stage: str = ""
    fund_utilized: str = ""
    construction_details: ConstructionDetails = Field(default_factory=ConstructionDetails)
    remarks: str = ""
    new_images: List[str] = Field(default_factory=list)

    @field_validator("stage", "fund_utilized", "remarks", mode="before")
    @classmethod
    def _none_is_blank(cls, value):
        return "" if value is None else value


# ── Officer ──────────────────────────────────────────────────────────

class Officer(PortalModel):
    id: Optional[int] = None
    name: str = Field(min_length=1)
    designation: str = ""
    constituency: str = ""
    contact_number: str = ""
    email: str = ""
    role: str = ""
    assigned_houses: List[int] = Field(default_factory=list)

    @field_validator("designation", "constituency", "contact_number", "email", "role", mode="before")
    @classmethod
    def _none_is_blank(cls, value):
        return "" if value is None else value

    @field_validator("assigned_houses", mode="before")
    @classmethod
    def _unique_houses(cls, value):
        if value is None:
            return []
        seen = []
        for house_id in value:
            if house_id not in seen:
                seen.append(house_id)
        return seen
