"""Expiry notification: spawn the audio player and never wait for it."""

from __future__ import annotations

import logging
import subprocess
import warnings

logger = logging.getLogger(__name__)

PLAYER = "pw-play"


def play_sound(path: str, player: str = PLAYER) -> None:
    """Start ``player path`` detached and return immediately.

    The child gets its own session and /dev/null for all standard streams,
    so it keeps playing after promo exits. Its exit status is never read and
    a failure to launch it is not an error.
    """
    if not path:
        return
    try:
        child = subprocess.Popen(
            [player, path],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        logger.debug("could not start %s: %s", player, exc)
        return
    logger.debug("started %s %s as pid %d", player, path, child.pid)
    # Never waited on; dropping the handle must not warn that it still runs.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", ResourceWarning)
        del child
