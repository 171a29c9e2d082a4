from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column, relationship

from drug_info.db.base import Base


def _new_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Drug(Base):
    __tablename__ = "drugs"

    id: Mapped[str] = mapped_column(Text, primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True, index=True)
    generic_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    brand_names: Mapped[list[str]] = mapped_column(
        JSON().with_variant(ARRAY(Text), "postgresql"), nullable=False, default=list
    )
    fda_generic_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    fda_brand_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    manufacturer: Mapped[str | None] = mapped_column(Text, nullable=True)
    route: Mapped[str | None] = mapped_column(Text, nullable=True)
    indications: Mapped[str | None] = mapped_column(Text, nullable=True)
    contraindications: Mapped[str | None] = mapped_column(Text, nullable=True)
    warnings: Mapped[str | None] = mapped_column(Text, nullable=True)
    boxed_warning: Mapped[str | None] = mapped_column(Text, nullable=True)
    dosage_info: Mapped[str | None] = mapped_column(Text, nullable=True)
    adverse_reactions: Mapped[str | None] = mapped_column(Text, nullable=True)
    raw_label_data: Mapped[Any | None] = mapped_column(JSON, nullable=True)
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    faqs: Mapped[list["DrugFAQ"]] = relationship(
        back_populates="drug", cascade="all, delete-orphan", passive_deletes=True
    )


class DrugFAQ(Base):
    __tablename__ = "drug_faqs"

    id: Mapped[str] = mapped_column(Text, primary_key=True, default=_new_id)
    drug_id: Mapped[str] = mapped_column(
        Text, ForeignKey("drugs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )

    drug: Mapped[Drug] = relationship(back_populates="faqs")
