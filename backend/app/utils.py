import math


def safe_int(v):
    """Coerce a raw dataset value to int, or None when it is blank or junk.

    Handles "1,23,456" style grouping and float strings like "1200.0".
    """
    if v is None:
        return None
    if isinstance(v, str):
        v = v.replace(",", "").strip()
        if not v:
            return None
    try:
        f = float(v)
    except (TypeError, ValueError):
        return None
    if math.isnan(f) or math.isinf(f):
        return None
    return int(f)


def clean_str(v):
    if v is None:
        return ""
    return str(v).strip()
