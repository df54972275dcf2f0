from datetime import datetime, timezone
from typing import Optional


def utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    # Las columnas DateTime no guardan zona: todo se normaliza a UTC sin tzinfo.
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
