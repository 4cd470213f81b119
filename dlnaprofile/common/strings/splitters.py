from typing import FrozenSet, List


def csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [s.strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def normalize_extension(ext: str | None) -> str | None:
    """'.MPG' -> 'mpg'; empty or missing -> None."""
    if ext is None:
        return None
    s = str(ext).strip().lower().lstrip(".")
    return s or None


def extension_set(v: str | List[str] | None) -> FrozenSet[str]:
    """Parse an allow-list like "aac,adts,.M4A" into {"aac", "adts", "m4a"}."""
    out = set()
    for item in csv_to_list(v):
        norm = normalize_extension(item)
        if norm:
            out.add(norm)
    return frozenset(out)
