"""Raw seat record as held by the inventory store."""

from typing import Optional

import attrs


@attrs.define(frozen=True)
class SeatRecord:
    id: str
    booked: Optional[bool] = None  # missing on records never written by a commit
