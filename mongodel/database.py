# coding: utf-8


# Defines the class managing the connection to the document store.

import enum
import logging

from monty.serialization import loadfn
from ruamel.yaml.error import YAMLError

from pymongo import MongoClient
from pymongo.errors import (
    InvalidURI,
    PyMongoError,
    OperationFailure,
    ConnectionFailure,
    ConfigurationError,
)

from mongodel.config import ConnectionConfig
from mongodel.exceptions import ConfigError, StoreConnectionError

__status__ = "Development"
__date__ = "Oct 2026"
__version__ = "0.1.0"

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 30000


class ConnectionState(enum.Enum):
    UNCONNECTED = "unconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    CLOSED = "closed"
    FAILED = "failed"


class DocumentDb:
    """
    Class to manage the lifetime of a single connection to a MongoDB
    server and to hand out collections from it.

    The connection moves through ``UNCONNECTED -> CONNECTING ->
    CONNECTED -> CLOSED``, or ends in ``FAILED`` if it cannot be
    established. It is never reopened. Use it as a context manager to
    make sure the client is closed on every exit path::

        with DocumentDb(config) as db:
            db.verify()
            coll = db.collection()
    """

    def __init__(
        self, config, timeout_ms=DEFAULT_TIMEOUT_MS, client_factory=None, **kwargs
    ):
        """
        Args:
            config (ConnectionConfig): connection parameters
            timeout_ms (int): server selection timeout in milliseconds,
                applied to the ping and to the delete
            client_factory (callable, optional): replaces MongoClient
                when creating the client
            **kwargs: other kwargs passed to MongoClient, e.g. tls options
        """
        self.config = config
        self.timeout_ms = timeout_ms
        self.client_factory = client_factory or MongoClient
        self.client_kwargs = kwargs
        self.client = None
        self.state = ConnectionState.UNCONNECTED

    def __enter__(self):
        try:
            self.connect()
        except Exception:
            self.close()
            raise
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.close()
            return False
        try:
            self.close()
        except StoreConnectionError as exc:
            logger.error(f"{exc} (while handling: {exc_val})")
        return False

    def connect(self):
        """
        Create the client for the configured server.

        Returns:
            MongoClient

        Raises:
            ConfigError: if the configuration is incomplete or rejected
                by the driver
            StoreConnectionError: if the client cannot be created
        """
        if self.state is not ConnectionState.UNCONNECTED:
            raise StoreConnectionError(
                f"Cannot connect a connection in state {self.state.value}"
            )
        self.config.validate()
        self.state = ConnectionState.CONNECTING
        logger.info(
            "Connecting to {}".format(self.config.redacted_connection_string())
        )
        try:
            self.client = self.client_factory(
                self.config.connection_string(),
                serverSelectionTimeoutMS=int(self.timeout_ms),
                **self.client_kwargs,
            )
        # the driver raises ValueError and TypeError for invalid options
        except (ConfigurationError, InvalidURI, ValueError, TypeError) as exc:
            self.state = ConnectionState.FAILED
            logger.error("Mongodb configuration rejected")
            raise ConfigError(f"Invalid connection settings: {exc}") from exc
        except PyMongoError as exc:
            self.state = ConnectionState.FAILED
            logger.error("Mongodb connection failed")
            raise StoreConnectionError(f"Mongodb connection failed: {exc}") from exc
        self.state = ConnectionState.CONNECTED
        return self.client

    def verify(self):
        """
        Ping the server to make sure it is reachable and accepts the
        credentials.

        Raises:
            StoreConnectionError: if the server is unreachable or
                authentication fails
        """
        self._check_connected()
        try:
            self.client.admin.command("ping")
        except OperationFailure as exc:
            logger.error("Mongodb authentication failed")
            raise StoreConnectionError(
                f"Mongodb authentication failed: {exc}"
            ) from exc
        except ConnectionFailure as exc:
            logger.error("Mongodb connection failed")
            raise StoreConnectionError(f"Mongodb connection failed: {exc}") from exc
        logger.debug("Ping succeeded")

    def collection(self, database=None, collection_name=None):
        """
        Get a collection of the connected server.

        Args:
            database (str, optional): name of the database; defaults to
                the configured one
            collection_name (str, optional): name of the collection;
                defaults to the configured one

        Returns:
            pymongo.collection.Collection
        """
        self._check_connected()
        database = database or self.config.database
        collection_name = collection_name or self.config.collection
        return self.client.get_database(database).get_collection(collection_name)

    def close(self):
        """
        Close the client. Only the first call has an effect.

        Raises:
            StoreConnectionError: if the driver fails while closing
        """
        if self.state is ConnectionState.CLOSED:
            logger.debug("Connection already closed")
            return
        if self.client is None:
            if self.state is ConnectionState.UNCONNECTED:
                self.state = ConnectionState.CLOSED
            return
        client, self.client = self.client, None
        self.state = ConnectionState.CLOSED
        try:
            client.close()
        except PyMongoError as exc:
            logger.error("Mongodb disconnection failed")
            raise StoreConnectionError(
                f"Mongodb disconnection failed: {exc}"
            ) from exc
        logger.debug("Connection closed")

    def _check_connected(self):
        if self.state is not ConnectionState.CONNECTED:
            raise StoreConnectionError(
                f"Connection is {self.state.value}, not connected"
            )

    @classmethod
    def from_db_file(cls, db_file, admin=True, **kwargs):
        """
        Create a new database object from a database file.

        Args:
            db_file (str): the path to the database file (json or yaml)
            admin (bool): whether to use admin credentials
            **kwargs: other kwargs passed to DocumentDb

        Returns:
            DocumentDb
        """
        try:
            creds = loadfn(db_file)
        except (OSError, ValueError, YAMLError) as exc:
            raise ConfigError(f"Cannot read database file {db_file}: {exc}") from exc
        if not isinstance(creds, dict):
            raise ConfigError(f"Database file {db_file} must define a mapping")

        # any other MongoClient kwargs can go here ...
        mongoclient_kwargs = creds.get("mongoclient_kwargs") or {}
        if not isinstance(mongoclient_kwargs, dict):
            raise ConfigError("mongoclient_kwargs must be a mapping")
        client_kwargs = dict(mongoclient_kwargs)
        client_kwargs.update(kwargs)
        if "timeout_ms" in creds:
            client_kwargs.setdefault("timeout_ms", creds["timeout_ms"])
        return cls(ConnectionConfig.from_dict(creds, admin=admin), **client_kwargs)
