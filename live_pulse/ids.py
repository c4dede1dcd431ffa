"""Signal identifiers."""

from __future__ import annotations

import time
import uuid


def new_signal_id() -> str:
    return f"lp_{int(time.time() * 1000)}_{uuid.uuid4().hex[:7]}"
