# coding: utf-8


# Defines the delete-by-identifier operation.

import logging

from collections import namedtuple

from bson.errors import InvalidId
from bson.objectid import ObjectId
from pymongo.errors import PyMongoError

from mongodel.exceptions import (
    OperationError,
    StoreConnectionError,
    InvalidIdentifierError,
)

__status__ = "Development"
__date__ = "Oct 2026"
__version__ = "0.1.0"

logger = logging.getLogger(__name__)

ID_FIELD = "_id"

DeleteResult = namedtuple("DeleteResult", ["deleted_count"])


def parse_identifier(raw):
    """
    Convert a hex string to an ObjectId. Runs before any connection is
    made so that malformed input never reaches the server.

    Args:
        raw (str or ObjectId): 24 hexadecimal characters, e.g.
            "642f238625b383fba5ca34f0"

    Returns:
        ObjectId

    Raises:
        InvalidIdentifierError: if raw is not a valid ObjectId
    """
    if isinstance(raw, ObjectId):
        return raw
    if not isinstance(raw, str):
        raise InvalidIdentifierError(
            f"Document identifier must be a string, not {type(raw).__name__}"
        )
    value = raw.strip()
    # ObjectId also accepts 12 raw bytes, only hex strings are valid here
    if len(value) != 24:
        raise InvalidIdentifierError(
            f"Invalid document identifier {raw!r}: expected 24 hex characters, "
            f"got {len(value)}"
        )
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdentifierError(
            f"Invalid document identifier {raw!r}: {exc}"
        ) from exc


def delete_by_identifier(collection, identifier, id_field=ID_FIELD):
    """
    Delete at most one document whose id_field equals identifier.

    Args:
        collection (pymongo.collection.Collection): the collection to
            delete from
        identifier (ObjectId): the parsed document identifier
        id_field (str): the field holding the identifier

    Returns:
        DeleteResult: deleted_count is 0 if no document matched
    """
    query = {id_field: identifier}
    try:
        result = collection.delete_one(query)
        deleted_count = result.deleted_count
    except PyMongoError as exc:
        logger.error(f"Deleting {identifier} from {collection.full_name} failed")
        raise OperationError(f"Delete failed: {exc}") from exc
    if deleted_count:
        logger.info(f"Deleted {identifier} from {collection.full_name}")
    else:
        logger.info(f"{identifier} not found in {collection.full_name}")
    return DeleteResult(deleted_count)


def delete_document(db, raw_identifier, id_field=ID_FIELD, **kwargs):
    """
    Parse the identifier, then connect, ping and delete the document.
    The connection is closed on every exit path. If closing fails after
    the delete, the raised error carries the DeleteResult as ``result``.

    Args:
        db (DocumentDb): an unconnected database object
        raw_identifier (str): hex representation of the identifier
        id_field (str): the field holding the identifier
        **kwargs: database and collection_name, passed to
            DocumentDb.collection

    Returns:
        DeleteResult
    """
    identifier = parse_identifier(raw_identifier)
    result = None
    try:
        with db:
            db.verify()
            collection = db.collection(**kwargs)
            result = delete_by_identifier(collection, identifier, id_field=id_field)
    except StoreConnectionError as exc:
        exc.result = result
        raise
    return result
