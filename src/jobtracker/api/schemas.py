from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobtracker.core.validation import coerce_flag, valid_string
from jobtracker.types import ApplicationStatus


class LoginRequest(BaseModel):
    username: str
    password: str

    @field_validator("username", "password", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return valid_string(value)


class RegisterRequest(LoginRequest):
    create_time: str

    @field_validator("create_time", mode="before")
    @classmethod
    def _blank_create_time(cls, value):
        return valid_string(value)


class TokenResponse(BaseModel):
    token: str


class SuccessResponse(BaseModel):
    success: bool


class ApplicationFields(BaseModel):
    job_title: str
    company_name: str
    job_description: str | None = None
    job_location: str | None = None
    job_url: str | None = None
    application_deadline_date: str | None = None
    application_date: str | None = None
    resume_version: str | None = None
    status: ApplicationStatus
    notes: str | None = None
    is_marked: int = 0

    @field_validator(
        "job_title",
        "company_name",
        "job_description",
        "job_location",
        "job_url",
        "application_deadline_date",
        "application_date",
        "resume_version",
        "status",
        "notes",
        mode="before",
    )
    @classmethod
    def _normalize_strings(cls, value):
        return valid_string(value)

    @field_validator("is_marked", mode="before")
    @classmethod
    def _coerce_is_marked(cls, value):
        return coerce_flag(value)


class ApplicationCreateRequest(ApplicationFields):
    pass


class ApplicationEditRequest(ApplicationFields):
    id: int


class ApplicationDeleteRequest(BaseModel):
    application_id: list[int] = Field(min_length=1)


class QuickAddRequest(BaseModel):
    url: str
    date: str | None = None

    @field_validator("url", "date", mode="before")
    @classmethod
    def _normalize_strings(cls, value):
        return valid_string(value)


class ApplicationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    job_title: str
    company_name: str
    job_description: str | None = None
    job_location: str | None = None
    job_url: str | None = None
    application_deadline_date: str | None = None
    application_date: str | None = None
    resume_version: str | None = None
    status: str
    notes: str | None = None
    is_marked: int


class ApplicationListResponse(BaseModel):
    results: list[ApplicationResponse]


class ApplicationCreatedResponse(SuccessResponse):
    id: int


class QuickAddResponse(SuccessResponse):
    application: ApplicationResponse


class DeleteResponse(BaseModel):
    success: int


class ApplicationSummaryResponse(BaseModel):
    total: int
    rejected: int
    rejection_rate: float
    by_status: dict[str, int]
