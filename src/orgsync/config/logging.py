"""CLI logging setup."""

from __future__ import annotations

import logging


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Send log records to stderr, with orgsync's own loggers at DEBUG when ``verbose``.

    Third-party loggers stay at INFO either way so ``-v`` does not flood the
    output with driver chatter.
    """

    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)-7s %(name)s: %(message)s",
        force=force,
    )
    logging.getLogger("orgsync").setLevel(logging.DEBUG if verbose else logging.INFO)
