# rocketcart/data/models/snapshot.py
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime

from rocketcart.data.database import Base


def _now():
    return datetime.now(timezone.utc)


class CartSnapshotModel(Base):
    __tablename__ = "cart_snapshots"

    key = Column(String(255), primary_key=True)
    blob = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)
