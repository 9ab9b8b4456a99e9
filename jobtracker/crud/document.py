"""
CRUD operations for schemaless documents.

This is the document store adapter: every operation is addressed by a
collection name and works on plain dictionaries, so services never touch
SQLAlchemy models directly. Each call is an independent unit of work.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from jobtracker.models.document import Document


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _new_document_id() -> str:
    return uuid.uuid4().hex


def _query(db: Session, collection: str):
    return db.query(Document).filter(Document.collection == collection)


def get_all(db: Session, collection: str) -> List[Dict[str, Any]]:
    """
    Retrieve every document in a collection.

    Args:
        db: Database session
        collection: Collection name

    Returns:
        List of documents with their id merged in, oldest first
    """
    documents = _query(db, collection).order_by(Document.created_at, Document.id).all()
    return [document.to_dict() for document in documents]


def get_by_id(db: Session, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
    """
    Retrieve a single document.

    Args:
        db: Database session
        collection: Collection name
        doc_id: Document id

    Returns:
        Document with its id merged in if found, None otherwise
    """
    document = _query(db, collection).filter(Document.id == doc_id).first()
    if not document:
        return None
    return document.to_dict()


def create(
    db: Session,
    collection: str,
    fields: Dict[str, Any],
    doc_id: Optional[str] = None
) -> str:
    """
    Create a new document.

    `createdAt` and `updatedAt` are stamped into the stored payload unless
    the caller supplied them.

    Args:
        db: Database session
        collection: Collection name
        fields: JSON-serializable document payload (without id)
        doc_id: Optional explicit id; one is generated when omitted

    Returns:
        The id of the created document
    """
    now = _timestamp()
    data = dict(fields)
    data.pop("id", None)
    data.setdefault("createdAt", now)
    data.setdefault("updatedAt", now)

    document = Document(
        collection=collection,
        id=doc_id or _new_document_id(),
        data=data,
    )

    db.add(document)
    db.commit()

    return document.id


def update(db: Session, collection: str, doc_id: str, fields: Dict[str, Any]) -> bool:
    """
    Merge fields into an existing document.

    Args:
        db: Database session
        collection: Collection name
        doc_id: Document id
        fields: Fields to overwrite; fields not listed are kept

    Returns:
        True if updated, False if not found
    """
    document = _query(db, collection).filter(Document.id == doc_id).first()
    if not document:
        return False

    merged = {**(document.data or {}), **fields}
    merged.pop("id", None)
    if "updatedAt" not in fields:
        merged["updatedAt"] = _timestamp()

    # Reassign so SQLAlchemy sees the JSON column change
    document.data = merged
    db.commit()

    return True


def delete(db: Session, collection: str, doc_id: str) -> bool:
    """
    Delete a document by id.

    Args:
        db: Database session
        collection: Collection name
        doc_id: Document id

    Returns:
        True if deleted, False if not found
    """
    document = _query(db, collection).filter(Document.id == doc_id).first()
    if not document:
        return False

    db.delete(document)
    db.commit()

    return True


def count(db: Session, collection: str) -> int:
    """Count the documents in a collection."""
    return db.query(func.count(Document.id)).filter(Document.collection == collection).scalar() or 0


def get_page(db: Session, collection: str, limit: int, offset: int) -> List[Dict[str, Any]]:
    """
    Retrieve one page of documents, ordered like get_all.

    Args:
        db: Database session
        collection: Collection name
        limit: Maximum number of documents to return
        offset: Number of documents to skip

    Returns:
        List of documents with their id merged in
    """
    documents = (
        _query(db, collection)
        .order_by(Document.created_at, Document.id)
        .offset(offset)
        .limit(limit)
        .all()
    )
    return [document.to_dict() for document in documents]
