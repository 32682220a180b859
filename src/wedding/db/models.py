"""SQLAlchemy models for invites and their guests."""

from typing import Optional

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wedding.db.base import Base


class Invite(Base):
    """A household or party receiving one invitation."""

    __tablename__ = "invites"

    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    country_code: Mapped[str] = mapped_column(String(8), nullable=False, default="")
    phone: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    group_name: Mapped[str] = mapped_column(String(100), nullable=False, default="", index=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationship
    guests: Mapped[list["Guest"]] = relationship(
        "Guest",
        back_populates="invite",
        cascade="all, delete-orphan",
        order_by="Guest.id",
    )


class Guest(Base):
    """An individual attendee belonging to exactly one invite."""

    __tablename__ = "guests"

    invite_id: Mapped[int] = mapped_column(ForeignKey("invites.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    gender: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    age_group: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    table_number: Mapped[str] = mapped_column(String(20), nullable=False, default="")

    # Relationship
    invite: Mapped["Invite"] = relationship("Invite", back_populates="guests")

    __table_args__ = (Index("ix_guests_invite_id", "invite_id"),)
