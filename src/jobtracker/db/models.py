from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobtracker.db.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)


class UserConfig(Base):
    __tablename__ = "config"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    create_time: Mapped[str] = mapped_column(String(64), nullable=False)
    quick_add_resume_version: Mapped[str | None] = mapped_column(
        "quickAddResumeVersion", String(255), nullable=True
    )


class JobApplication(TimestampMixin, Base):
    __tablename__ = "job_applications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    job_title: Mapped[str] = mapped_column(String(255), nullable=False)
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    job_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    job_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    job_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    application_deadline_date: Mapped[str | None] = mapped_column(String(32), nullable=True)
    application_date: Mapped[str | None] = mapped_column(String(32), nullable=True)
    resume_version: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(32), default="Applied", nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_marked: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
