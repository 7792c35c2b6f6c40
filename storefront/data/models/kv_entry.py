#storefront/data/models/kv_entry.py
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime

from storefront.data.database import Base


class KeyValueModel(Base):
    __tablename__ = "kv_entries"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False)  # JSON
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
