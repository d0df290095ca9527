"""Star ORM model: a dashboard starred by a user."""

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from dashsearch.infrastructure.persistence.database import Base


class Star(Base):
    """Starred dashboard. Table: star. Unique (user_id, dashboard_id)."""

    __tablename__ = "star"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    dashboard_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("dashboard.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("user_id", "dashboard_id", name="uq_star_user_id_dashboard_id"),
    )
