# Runs cog over python files that contain type_union blocks and rewrites them in place.

import argparse
import logging
import logging.config
import subprocess

from .config import DEFAULT_CONFIG, load_config
from .tools import run_cog

logger = logging.getLogger("type_union")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {"format": "%(levelname)s: %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": "standard",
        },
    },
    "loggers": {
        "type_union": {"level": "INFO", "handlers": ["console"], "propagate": False},
    },
}


def configure_logging(verbose=False):
    config = dict(LOGGING)
    config["loggers"] = {
        "type_union": dict(
            LOGGING["loggers"]["type_union"], level="DEBUG" if verbose else "INFO"
        )
    }
    logging.config.dictConfig(config)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="type-union",
        description="Expand type_union declarations in cog blocks of python files.",
    )
    parser.add_argument(
        "files", metavar="FILE", nargs="*", help="Files to process in place."
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only check that the generated code is up to date.",
    )
    parser.add_argument(
        "-I",
        "--include",
        metavar="DIR",
        action="append",
        default=[],
        help="Add a directory to the import path of cog blocks.",
    )
    parser.add_argument(
        "--config", metavar="PATH", help="YAML configuration file (files, include, check)."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug output."
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(args.config) if args.config else dict(DEFAULT_CONFIG)
    except (OSError, ValueError) as err:
        logger.error("%s", err)
        return 2

    files = [*config["files"], *args.files]
    include = [*config["include"], *args.include]
    check = args.check or config["check"]
    if not files:
        logger.error("no files to process")
        return 2

    logger.info("%s %d file(s)", "checking" if check else "expanding", len(files))

    # One cog run per file, so a broken file does not stop the others.
    status = 0
    for path in files:
        try:
            run_cog(path, include=include, check=check)
        except subprocess.CalledProcessError as err:
            logger.error("%s: cog failed with exit status %d", path, err.returncode)
            status = status or err.returncode
    return status
