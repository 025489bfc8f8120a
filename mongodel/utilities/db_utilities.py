"""Define db utility functions."""

import os
import logging

from fireworks.fw_config import CONFIG_FILE_DIR

from mongodel.config import ConnectionConfig
from mongodel.database import DocumentDb

__status__ = "Development"
__date__ = "Oct 2026"
__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def get_db(input_db=None, **kwargs):
    """
    Helper function to create a DocumentDb instance from a file, a dict
    or the environment.

    Args:
        input_db (str or dict, optional): Path to db file or a dict
            containing db info. If not provided, db.json in the FireWorks
            config directory is used if it exists, else the MONGO_*
            environment variables.
        **kwargs: other kwargs passed to DocumentDb, e.g. timeout_ms

    Returns:
        DocumentDb, not yet connected.
    """
    if not input_db:
        default_file = os.path.join(CONFIG_FILE_DIR, "db.json")
        if os.path.isfile(default_file):
            input_db = default_file
        else:
            logger.debug(f"{default_file} not found, reading the environment")
            return DocumentDb(ConnectionConfig.from_env(), **kwargs)
    if isinstance(input_db, dict):
        input_db = dict(input_db)
        client_kwargs = input_db.pop("mongoclient_kwargs", {})
        return DocumentDb(
            ConnectionConfig.from_dict(input_db), **{**client_kwargs, **kwargs}
        )
    return DocumentDb.from_db_file(input_db, **kwargs)
