# coding: utf-8


# Defines firetasks for deleting documents from a database.

import logging

from fireworks.core.firework import FWAction, FiretaskBase
from fireworks.utilities.fw_utilities import explicit_serialize

from mongodel.operations import ID_FIELD, delete_document
from mongodel.utilities.db_utilities import get_db

__status__ = "Development"
__date__ = "Oct 2026"
__version__ = "0.1.0"

logger = logging.getLogger(__name__)

DEFAULT_KEY = "deleted_count"


@explicit_serialize
class DeleteDocument(FiretaskBase):
    """
    Delete one document by its ObjectId and pass the number of deleted
    documents (0 or 1) to the children fireworks.

    Args:
        identifier (str): hex representation of the document ObjectId

    Optional params:
        db (str or dict): path to a db file or a dict of db settings;
            see get_db
        database (str): overrides the configured database
        collection (str): overrides the configured collection
        id_field (str): field holding the identifier; defaults to _id
        deleted_count_key (str): spec key the count is stored under
    """

    required_params = ["identifier"]
    optional_params = [
        "db",
        "database",
        "collection",
        "id_field",
        "deleted_count_key",
    ]

    def run_task(self, fw_spec):
        db = get_db(self.get("db"))
        result = delete_document(
            db,
            self["identifier"],
            id_field=self.get("id_field", ID_FIELD),
            database=self.get("database"),
            collection_name=self.get("collection"),
        )
        key = self.get("deleted_count_key", DEFAULT_KEY)
        return FWAction(update_spec={key: result.deleted_count})
