"""
MongoDB connection and document helpers.

The client is created once at application startup (see ``main.lifespan``) and
handed to routes through ``get_db``.
"""
import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from bson import ObjectId
from pydantic import BaseModel
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL")
DATABASE_NAME = os.getenv("DATABASE_NAME", "ecommerce_admin")

# Unique keys per collection
UNIQUE_INDEXES = {
    "article": ["slug"],
    "category": ["slug"],
    "product": ["slug"],
}


def connect(url: Optional[str] = DATABASE_URL, name: str = DATABASE_NAME):
    """Return ``(client, db)`` or ``(None, None)`` when no URL is configured."""
    if not url:
        logger.warning("DATABASE_URL is not set, running without a database")
        return None, None
    client = MongoClient(url)
    db = client[name]
    logger.info("Connected to MongoDB database %s", name)
    return client, db


def ensure_indexes(db: Database) -> None:
    for collection, fields in UNIQUE_INDEXES.items():
        for field in fields:
            db[collection].create_index([(field, ASCENDING)], unique=True)
    db["category"].create_index([("parentCategory", ASCENDING)])


def _now():
    return datetime.now(timezone.utc)


def create_document(db: Database, collection_name: str, data: Union[BaseModel, Dict[str, Any]]) -> str:
    """Insert a document, stamping created_at/updated_at. Returns the new id as a string."""
    if isinstance(data, BaseModel):
        doc = data.model_dump()
    else:
        doc = dict(data)
    now = _now()
    doc["created_at"] = now
    doc["updated_at"] = now
    inserted_id = db[collection_name].insert_one(doc).inserted_id
    return str(inserted_id)


def get_documents(db: Database, collection_name: str, filter_dict: Optional[Dict[str, Any]] = None,
                  limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """Documents matching ``filter_dict``, newest first."""
    cursor = db[collection_name].find(filter_dict or {}).sort([("created_at", -1)])
    if limit:
        cursor = cursor.limit(limit)
    return list(cursor)


def update_document(db: Database, collection_name: str, oid: ObjectId, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Apply ``$set`` changes and return the updated document, or None if it does not exist."""
    changes = {**changes, "updated_at": _now()}
    result = db[collection_name].update_one({"_id": oid}, {"$set": changes})
    if result.matched_count == 0:
        return None
    return db[collection_name].find_one({"_id": oid})


def serialize(value: Any) -> Any:
    """Make a stored document JSON friendly: ``_id`` becomes ``id``, ObjectIds become strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, list):
        return [serialize(v) for v in value]
    if isinstance(value, dict):
        out = {}
        for key, item in value.items():
            if key == "_id":
                out["id"] = str(item)
            else:
                out[key] = serialize(item)
        return out
    return value
