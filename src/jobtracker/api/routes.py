from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobtracker.api.deps import get_app_settings, get_current_user_id, get_db
from jobtracker.api.schemas import (
    ApplicationCreateRequest,
    ApplicationCreatedResponse,
    ApplicationDeleteRequest,
    ApplicationEditRequest,
    ApplicationListResponse,
    ApplicationResponse,
    ApplicationSummaryResponse,
    DeleteResponse,
    LoginRequest,
    QuickAddRequest,
    QuickAddResponse,
    RegisterRequest,
    SuccessResponse,
    TokenResponse,
)
from jobtracker.config import Settings
from jobtracker.core.job_fetcher import JobFetchError, fetch_job_posting
from jobtracker.core.security import hash_password, issue_user_token, verify_password
from jobtracker.db.repositories import Repository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])
applications_router = APIRouter(prefix="/applications", tags=["applications"])


@router.post("/login", response_model=TokenResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> TokenResponse:
    repo = Repository(db)
    user = repo.get_user_by_username(payload.username)
    if not user or not verify_password(payload.password, user.password):
        logger.info("Failed login for %r", payload.username)
        raise HTTPException(status_code=401, detail="Invalid username or password")

    token = issue_user_token(user.id, user.username, settings.jwt_secret, settings.jwt_ttl_sec)
    return TokenResponse(token=token)


@router.post("/register", response_model=SuccessResponse)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> SuccessResponse:
    repo = Repository(db)
    if repo.get_user_by_username(payload.username):
        raise HTTPException(status_code=400, detail="Username already exists")

    password_hash = hash_password(payload.password, rounds=settings.bcrypt_rounds)
    try:
        user = repo.create_user(
            username=payload.username,
            password_hash=password_hash,
            create_time=payload.create_time,
        )
    except IntegrityError as exc:
        raise HTTPException(status_code=400, detail="Username already exists") from exc

    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return SuccessResponse(success=True)


@applications_router.get("", response_model=ApplicationListResponse)
def list_applications(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ApplicationListResponse:
    rows = Repository(db).list_applications(user_id)
    return ApplicationListResponse(results=[ApplicationResponse.model_validate(row) for row in rows])


@applications_router.get("/summary", response_model=ApplicationSummaryResponse)
def summarize_applications(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ApplicationSummaryResponse:
    by_status = Repository(db).count_applications_by_status(user_id)
    total = sum(by_status.values())
    rejected = by_status["Rejected"]
    rate = round(rejected / total * 100, 2) if total else 0.0
    return ApplicationSummaryResponse(
        total=total,
        rejected=rejected,
        rejection_rate=rate,
        by_status=by_status,
    )


@applications_router.post("/add", response_model=ApplicationCreatedResponse)
def add_application(
    payload: ApplicationCreateRequest,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ApplicationCreatedResponse:
    application = Repository(db).create_application(user_id, payload.model_dump())
    return ApplicationCreatedResponse(success=True, id=application.id)


@applications_router.post("/quickadd", response_model=QuickAddResponse)
def quick_add_application(
    payload: QuickAddRequest,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> QuickAddResponse:
    if "linkedin.com" not in payload.url:
        raise HTTPException(status_code=400, detail="Invalid LinkedIn URL")

    try:
        posting = fetch_job_posting(payload.url, timeout_sec=settings.scrape_timeout_sec)
    except JobFetchError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc

    repo = Repository(db)
    config = repo.get_user_config(user_id)
    application = repo.create_application(
        user_id,
        {
            "job_title": posting.title,
            "company_name": posting.company,
            "job_location": posting.location,
            "job_url": payload.url,
            "application_date": payload.date,
            "resume_version": config.quick_add_resume_version if config else None,
            "status": "Applied",
            "is_marked": 0,
        },
    )
    logger.info("Quick-added application %s for user %s", application.id, user_id)
    return QuickAddResponse(success=True, application=ApplicationResponse.model_validate(application))


@applications_router.post("/edit", response_model=SuccessResponse)
def edit_application(
    payload: ApplicationEditRequest,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> SuccessResponse:
    values = payload.model_dump(exclude={"id"})
    updated = Repository(db).update_application(user_id, payload.id, values)
    if not updated:
        raise HTTPException(status_code=404, detail="Application not found")
    return SuccessResponse(success=True)


@applications_router.post("/delete", response_model=DeleteResponse)
def delete_applications(
    payload: ApplicationDeleteRequest,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> DeleteResponse:
    deleted = Repository(db).delete_applications(user_id, payload.application_id)
    logger.info("Deleted %s of %s applications for user %s", deleted, len(payload.application_id), user_id)
    return DeleteResponse(success=deleted)
