# coding: utf-8


# Defines the connection configuration and the ways of loading it.

import os
import logging

from collections import namedtuple
from urllib.parse import quote_plus

from dotenv import find_dotenv, load_dotenv

from mongodel.exceptions import ConfigError

__status__ = "Development"
__date__ = "Oct 2026"
__version__ = "0.1.0"

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("user", "password", "host", "port", "database", "collection")
URI_MODE_REQUIRED_FIELDS = ("database", "collection")
URI_SCHEMES = ("mongodb://", "mongodb+srv://")
ENV_PREFIX = "MONGO_"


class ConnectionConfig(
    namedtuple(
        "ConnectionConfig",
        ["user", "password", "host", "port", "database", "collection",
         "authsource", "uri"],
        defaults=(None, None),
    )
):
    """
    Immutable record of the parameters needed to reach one collection.

    Args:
        user (str): name of the database user
        password (str): password of the database user
        host (str): hostname of the server
        port (str): port of the server
        database (str): name of the database holding the collection
        collection (str): name of the collection
        authsource (str, optional): database to authenticate against;
            the server default (admin) is used if not provided
        uri (str, optional): full connection string; when given, user,
            password, host, port and authsource are ignored
    """

    __slots__ = ()

    def __repr__(self):
        password = "****" if self.password else self.password
        return (
            f"ConnectionConfig(user={self.user!r}, password={password!r}, "
            f"host={self.host!r}, port={self.port!r}, "
            f"database={self.database!r}, collection={self.collection!r}, "
            f"authsource={self.authsource!r}, "
            f"uri={'<set>' if self.uri else None!r})"
        )

    __str__ = __repr__

    @property
    def uri_mode(self):
        return bool(self.uri)

    def validate(self):
        """
        Check that every required field is set.

        Raises:
            ConfigError: if a required field is empty, the port is not a
                valid port number or the uri has an unknown scheme
        """
        required = URI_MODE_REQUIRED_FIELDS if self.uri_mode else REQUIRED_FIELDS
        missing = [f for f in required if not str(getattr(self, f) or "").strip()]
        if missing:
            raise ConfigError(
                "Missing required connection settings: {}".format(", ".join(missing))
            )
        if self.uri_mode:
            if not self.uri.startswith(URI_SCHEMES):
                raise ConfigError(
                    "Connection uri must start with one of: {}".format(
                        ", ".join(URI_SCHEMES)
                    )
                )
            return
        port = str(self.port).strip()
        if not port.isdigit() or not 0 < int(port) < 65536:
            raise ConfigError(f"Invalid port: {self.port!r}")

    def connection_string(self):
        if self.uri_mode:
            return self.uri
        return self._build_uri(quote_plus(str(self.password)))

    def redacted_connection_string(self):
        """Connection string safe for logging."""
        if self.uri_mode:
            return _redact_uri(self.uri)
        return self._build_uri("****")

    def _build_uri(self, password):
        uri = "mongodb://{}:{}@{}:{}/".format(
            quote_plus(str(self.user)), password, self.host, str(self.port).strip()
        )
        if self.authsource:
            uri += f"?authSource={quote_plus(self.authsource)}"
        return uri

    @classmethod
    def from_env(cls, env_file=None, prefix=ENV_PREFIX):
        """
        Create a config from environment variables, after loading a
        dotenv file. Variables already set in the environment take
        precedence over the file.

        Args:
            env_file (str, optional): path to the dotenv file; if not
                provided, a ``.env`` file is searched for from the current
                directory upwards but not required
            prefix (str): prefix of the variable names, e.g. MONGO_USER

        Returns:
            ConnectionConfig
        """
        if env_file:
            if not os.path.isfile(env_file):
                raise ConfigError(f"Environment file {env_file} not found")
        else:
            env_file = find_dotenv(usecwd=True)
        if env_file:
            logger.debug(f"Loading environment from {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("No .env file found, using the process environment")

        values = {
            field: os.getenv(f"{prefix}{field.upper()}")
            for field in cls._fields
        }
        return cls(**values)

    @classmethod
    def from_dict(cls, creds, admin=True):
        """
        Create a config from a dictionary of credentials, e.g. the content
        of a db.json file.

        Args:
            creds (dict): must contain host, database and collection; the
                credentials are given either as user/password or as
                admin_user/admin_password and readonly_user/readonly_password
            admin (bool): whether to use the admin credentials when both
                pairs are defined

        Returns:
            ConnectionConfig
        """
        if creds.get("uri_mode", False):
            return cls(
                user=None,
                password=None,
                host=None,
                port=None,
                database=creds.get("database"),
                collection=creds.get("collection"),
                uri=creds.get("host"),
            )

        if "user" in creds or "username" in creds:
            user = creds.get("user", creds.get("username"))
            password = creds.get("password")
        else:
            if admin and "admin_user" not in creds and "readonly_user" in creds:
                raise ConfigError(
                    "Trying to use admin credentials, "
                    "but no admin credentials are defined. "
                    "Use admin=False if only read_only "
                    "credentials are available."
                )
            if admin:
                user = creds.get("admin_user")
                password = creds.get("admin_password")
            else:
                user = creds.get("readonly_user")
                password = creds.get("readonly_password")

        port = creds.get("port", 27017)
        return cls(
            user=user,
            password=password,
            host=creds.get("host"),
            port=str(port) if port is not None else None,
            database=creds.get("database", creds.get("name")),
            collection=creds.get("collection"),
            authsource=creds.get("authsource"),
        )

    def replace(self, **kwargs):
        """Return a copy with the given non-empty fields replaced."""
        return self._replace(**{k: v for k, v in kwargs.items() if v})


def _redact_uri(uri):
    scheme, sep, rest = uri.partition("://")
    if not sep:
        return uri
    # userinfo can only appear before the path
    authority, slash, path = rest.partition("/")
    if "@" not in authority:
        return uri
    userinfo, _, hosts = authority.rpartition("@")
    user = userinfo.split(":", 1)[0]
    return f"{scheme}://{user}:****@{hosts}{slash}{path}"
