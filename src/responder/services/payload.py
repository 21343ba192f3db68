"""Response payload construction.

The instance id and the timestamp are captured when the payload is built,
never at process start, so every request sees its own values.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Protocol

from responder.schemas.payload import ResponsePayload

MESSAGE = "Hola desde el Backend (Cuenta AWS 2)"
STATUS = "Activo"
INSTANCE_ID_LIMIT = 10000


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as UTC ISO-8601 with milliseconds and a ``Z`` suffix.

    Naive datetimes are taken to already be in UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_payload(
    rng: RandomSource | None = None,
    clock: Callable[[], datetime] | None = None,
) -> ResponsePayload:
    """Build the root endpoint payload.

    Args:
        rng: Object exposing ``randrange``; defaults to the ``random`` module.
        clock: Zero-argument callable returning the current time; defaults
            to :func:`utc_now`.

    Returns:
        A new ResponsePayload with a freshly drawn instance id and timestamp.
    """
    rng = rng or random
    clock = clock or utc_now
    return ResponsePayload(
        message=MESSAGE,
        status=STATUS,
        instance_id=rng.randrange(INSTANCE_ID_LIMIT),
        timestamp=format_timestamp(clock()),
    )
