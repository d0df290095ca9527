"""Dashboard, DashboardTag and Folder ORM models.

The dashboard table holds dashboards and folders (is_folder); folder_uid
points at the containing folder. The folder table carries the parent
links used to expand nested folder permissions.
"""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from dashsearch.infrastructure.persistence.database import Base


class Dashboard(Base):
    """Dashboard or folder row. Table: dashboard. Unique (org_id, uid)."""

    __tablename__ = "dashboard"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    org_id: Mapped[int] = mapped_column(Integer, nullable=False)
    uid: Mapped[str] = mapped_column(String(40), nullable=False)
    slug: Mapped[str] = mapped_column(String(189), nullable=False, default="")
    title: Mapped[str] = mapped_column(String(189), nullable=False)
    is_folder: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    folder_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    folder_uid: Mapped[str | None] = mapped_column(String(40), nullable=True)
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint("org_id", "uid", name="uq_dashboard_org_id_uid"),
        Index("ix_dashboard_org_id_folder_uid", "org_id", "folder_uid"),
        Index("ix_dashboard_title", "title"),
    )


class DashboardTag(Base):
    """Tag attached to a dashboard. Table: dashboard_tag."""

    __tablename__ = "dashboard_tag"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    dashboard_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("dashboard.id", ondelete="CASCADE"), nullable=False
    )
    term: Mapped[str] = mapped_column(String(50), nullable=False)

    __table_args__ = (Index("ix_dashboard_tag_dashboard_id", "dashboard_id"),)


class Folder(Base):
    """Folder hierarchy node. Table: folder. parent_uid is None at the root."""

    __tablename__ = "folder"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    org_id: Mapped[int] = mapped_column(Integer, nullable=False)
    uid: Mapped[str] = mapped_column(String(40), nullable=False)
    parent_uid: Mapped[str | None] = mapped_column(String(40), nullable=True)
    title: Mapped[str] = mapped_column(String(189), nullable=False)

    __table_args__ = (
        UniqueConstraint("org_id", "uid", name="uq_folder_org_id_uid"),
        Index("ix_folder_org_id_parent_uid", "org_id", "parent_uid"),
    )
