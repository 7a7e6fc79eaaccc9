from datetime import datetime, timezone
from typing import List, Optional, Union


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def split_csv(value: Union[str, List[str], None]) -> List[str]:
    """Accept a list or a comma-separated string; return trimmed, non-empty items."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(v).strip() for v in value if str(v).strip()]


def split_lines(value: Union[str, List[str], None]) -> Union[str, List[str], None]:
    """Newline-separated text to a list of trimmed, non-empty lines. None and "" pass through."""
    if value is None or value == "":
        return value
    if isinstance(value, str):
        value = value.split("\n")
    return [line.strip() for line in value if line and line.strip()]


def join_lines(value: Union[str, List[str], None]) -> str:
    if isinstance(value, list):
        return "\n".join(value)
    return value or ""


def reject_null(value):
    """Partial updates may omit a field but may not send null for a required column."""
    if value is None:
        raise ValueError("may not be null")
    return value


def dedupe(values: List[str]) -> List[str]:
    """Trimmed, blank-free, first occurrence wins."""
    seen = set()
    out = []
    for v in values:
        v = v.strip()
        if v and v not in seen:
            seen.add(v)
            out.append(v)
    return out


def client_ip(request) -> str:
    """Client address behind at most one trusted proxy hop.

    The proxy appends the peer it saw to X-Forwarded-For, so the last entry
    is the one that can be trusted.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        hops = [h.strip() for h in forwarded.split(",") if h.strip()]
        if hops:
            return hops[-1]
    if request.client:
        return request.client.host
    return "127.0.0.1"
