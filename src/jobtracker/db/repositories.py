from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session

from jobtracker.db.models import JobApplication, User, UserConfig
from jobtracker.types import APPLICATION_STATUSES

APPLICATION_FIELDS = (
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
    "is_marked",
)


class Repository:
    """Storage operations. Every job application query is scoped by ``user_id``."""

    def __init__(self, session: Session):
        self.session = session

    def get_user_by_username(self, username: str) -> User | None:
        return self.session.scalar(select(User).where(User.username == username))

    def create_user(self, *, username: str, password_hash: str, create_time: str) -> User:
        """Insert the user and its config row in a single transaction."""
        user = User(username=username, password=password_hash)
        self.session.add(user)
        try:
            self.session.flush()
            self.session.add(UserConfig(user_id=user.id, create_time=create_time))
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(user)
        return user

    def get_user_config(self, user_id: int) -> UserConfig | None:
        return self.session.get(UserConfig, user_id)

    def set_quick_add_resume_version(self, user_id: int, version: str | None) -> UserConfig:
        config = self.session.get(UserConfig, user_id)
        if not config:
            raise ValueError(f"config for user {user_id} not found")
        config.quick_add_resume_version = version
        self.session.commit()
        self.session.refresh(config)
        return config

    def list_applications(self, user_id: int) -> list[JobApplication]:
        statement = (
            select(JobApplication)
            .where(JobApplication.user_id == user_id)
            .order_by(JobApplication.application_date.desc(), JobApplication.id.desc())
        )
        return list(self.session.scalars(statement).all())

    def get_application(self, user_id: int, application_id: int) -> JobApplication | None:
        return self.session.scalar(
            select(JobApplication).where(
                JobApplication.id == application_id,
                JobApplication.user_id == user_id,
            )
        )

    def create_application(self, user_id: int, values: dict[str, Any]) -> JobApplication:
        application = JobApplication(user_id=user_id, **_application_values(values))
        self.session.add(application)
        self.session.commit()
        self.session.refresh(application)
        return application

    def update_application(self, user_id: int, application_id: int, values: dict[str, Any]) -> int:
        result = self.session.execute(
            update(JobApplication)
            .where(JobApplication.id == application_id, JobApplication.user_id == user_id)
            .values(**_application_values(values))
        )
        self.session.commit()
        return result.rowcount

    def delete_applications(self, user_id: int, application_ids: Iterable[int]) -> int:
        deleted = 0
        for application_id in application_ids:
            result = self.session.execute(
                delete(JobApplication).where(
                    JobApplication.id == application_id,
                    JobApplication.user_id == user_id,
                )
            )
            deleted += result.rowcount
        self.session.commit()
        return deleted

    def count_applications_by_status(self, user_id: int) -> dict[str, int]:
        rows = self.session.execute(
            select(JobApplication.status, func.count(JobApplication.id))
            .where(JobApplication.user_id == user_id)
            .group_by(JobApplication.status)
        ).all()
        counts = {status: 0 for status in APPLICATION_STATUSES}
        for status, count in rows:
            counts[status] = count
        return counts


def _application_values(values: dict[str, Any]) -> dict[str, Any]:
    return {key: values[key] for key in APPLICATION_FIELDS if key in values}
