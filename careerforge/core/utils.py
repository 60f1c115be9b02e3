from __future__ import annotations
import re
from datetime import datetime, timezone
from typing import Iterable, Optional

def utc_now() -> datetime:
    # Naive UTC; SQLite drops tzinfo anyway
    return datetime.now(timezone.utc).replace(tzinfo=None)

def clean_text(s: Optional[str]) -> str:
    s = s or ""
    s = re.sub(r"\s+", " ", s).strip()
    return s

def join_list(items: Optional[Iterable[str]], sep: str = ", ") -> str:
    if not items:
        return ""
    return sep.join([clean_text(str(x)) for x in items if x is not None and str(x).strip()])
