"""
Catalog repository for the prompt deck.

Loads the read-only category catalog from a JSON file (default) or from a
MongoDB collection. Any malformed input is a CatalogLoadError.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError
from pymongo import MongoClient
from pymongo.collection import Collection

from core.deck.errors import CatalogLoadError
from core.schemas import Catalog

# Load environment
load_dotenv()

# Configuration
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "cards.json"
DEFAULT_DB_NAME = "nextcard"
DEFAULT_COLLECTION_NAME = "categories"

# Global connection (reused across reruns)
_client: Optional[MongoClient] = None
_collection: Optional[Collection] = None


def _validate(document: object, source: str) -> Catalog:
    try:
        return Catalog.model_validate(document)
    except ValidationError as exc:
        raise CatalogLoadError(f"Invalid catalog in {source}: {exc}") from exc


# ---- File Source ----

def load_catalog_from_file(path: str | Path) -> Catalog:
    """
    Load the catalog from a JSON document.

    Args:
        path: File holding {"categories": [{id, name, color, gradient, prompts}, ...]}

    Returns:
        Validated Catalog
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            document = json.load(f)
    except OSError as exc:
        raise CatalogLoadError(f"Cannot read catalog file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"Catalog file {path} is not valid JSON: {exc}") from exc

    return _validate(document, str(path))


# ---- MongoDB Source ----

def get_collection() -> Collection:
    """
    Get the MongoDB categories collection.

    The client is created once and reused.
    """
    global _client, _collection

    if _collection is not None:
        return _collection

    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise CatalogLoadError("MONGO_URI not found in environment variables")

    _client = MongoClient(
        mongo_uri,
        maxPoolSize=5,
        minPoolSize=1,
        maxIdleTimeMS=60000
    )
    db = _client[os.getenv("CATALOG_DB_NAME", DEFAULT_DB_NAME)]
    _collection = db[os.getenv("CATALOG_COLLECTION", DEFAULT_COLLECTION_NAME)]
    return _collection


def load_catalog_from_mongo(collection: Optional[Collection] = None) -> Catalog:
    """
    Load the catalog from a MongoDB collection.

    Each document is one category; documents are ordered by their
    `position` field.

    Args:
        collection: Collection to read (defaults to get_collection())

    Returns:
        Validated Catalog
    """
    collection = collection if collection is not None else get_collection()
    documents = list(collection.find({}, {"_id": 0, "position": 0}).sort("position", 1))
    return _validate({"categories": documents}, f"collection {collection.name}")


# ---- Entry Point ----

def load_catalog() -> Catalog:
    """
    Load the catalog from the source named by CATALOG_SOURCE.

    CATALOG_SOURCE is "file" (default, reads CATALOG_PATH) or "mongo".
    """
    source = os.getenv("CATALOG_SOURCE", "file").lower()
    if source == "mongo":
        return load_catalog_from_mongo()
    if source == "file":
        return load_catalog_from_file(os.getenv("CATALOG_PATH") or DEFAULT_CATALOG_PATH)
    raise CatalogLoadError(f"Unknown CATALOG_SOURCE: {source!r}")
