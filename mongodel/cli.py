# coding: utf-8


# Command line entry point: delete one document by its ObjectId.

import sys
import logging
import argparse

from mongodel.config import ConnectionConfig
from mongodel.database import DEFAULT_TIMEOUT_MS, DocumentDb
from mongodel.reporter import report
from mongodel.exceptions import MongodelError
from mongodel.operations import ID_FIELD, delete_document
from mongodel.utilities.db_utilities import get_db

__status__ = "Development"
__date__ = "Oct 2026"
__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def positive_int(value):
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value!r}")
    return number


def get_parser():
    parser = argparse.ArgumentParser(
        prog="mongodel-delete",
        description="Delete a single MongoDB document by its ObjectId",
    )
    parser.add_argument(
        "identifier", help="24 hex characters, e.g. 642f238625b383fba5ca34f0"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--db-file", help="json or yaml file with the database settings"
    )
    source.add_argument(
        "--env-file", help="dotenv file defining the MONGO_* variables"
    )
    parser.add_argument("--database", help="overrides the configured database")
    parser.add_argument("--collection", help="overrides the configured collection")
    parser.add_argument(
        "--id-field", default=ID_FIELD, help="field holding the identifier"
    )
    parser.add_argument(
        "--timeout",
        type=positive_int,
        help="server selection timeout in milliseconds; overrides the db "
        f"file, defaults to {DEFAULT_TIMEOUT_MS}",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def setup_logging(verbose=False):
    # stdout only carries the deleted count
    root = logging.getLogger("mongodel")
    if not root.handlers:
        ch = logging.StreamHandler(stream=sys.stderr)
        ch.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        root.addHandler(ch)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


def build_db(args):
    kwargs = {}
    if args.timeout is not None:
        kwargs["timeout_ms"] = args.timeout
    if args.env_file:
        db = DocumentDb(ConnectionConfig.from_env(args.env_file), **kwargs)
    else:
        db = get_db(args.db_file, **kwargs)
    db.config = db.config.replace(database=args.database, collection=args.collection)
    return db


def main(argv=None):
    args = get_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        db = build_db(args)
        outcome = delete_document(db, args.identifier, id_field=args.id_field)
    except MongodelError as exc:
        outcome = exc
    return report(outcome)


if __name__ == "__main__":
    sys.exit(main())
