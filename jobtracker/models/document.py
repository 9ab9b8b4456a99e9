from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, JSON, Index
from jobtracker.core.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Document(Base):
    """
    A schemaless document addressed by collection name and id.

    The payload lives in the JSON `data` column; the timestamp columns only
    drive ordering of list and page reads.
    """
    __tablename__ = "documents"

    collection = Column(String, primary_key=True)
    id = Column(String, primary_key=True)
    data = Column(JSON, nullable=False, default=dict)

    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    __table_args__ = (
        Index("ix_documents_collection_created_at", "collection", "created_at"),
    )

    def to_dict(self) -> dict:
        """Return the stored payload with the document id merged in."""
        return {"id": self.id, **(self.data or {})}

    def __repr__(self):
        return f"<Document(collection='{self.collection}', id='{self.id}')>"
