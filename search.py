import re
from typing import Dict, Any, List, Iterable

SEARCH_LIMIT = 50
SEARCH_MODES = ("site", "address", "city", "brand", "ip")
IP_KEYS = ("IP: Address", "IP Address", "IP")

_NON_DIGIT = re.compile(r"[^0-9]")


def normalize_mode(mode) -> str:
    return mode if mode in SEARCH_MODES else "site"


def _text(v) -> str:
    return "" if v is None else str(v)


def _first(row: Dict[str, Any], *keys) -> str:
    for k in keys:
        if row.get(k):
            return _text(row[k])
    return ""


def digits(s: str) -> str:
    return _NON_DIGIT.sub("", s)


def pad_site(num: str) -> str:
    return num.zfill(4) if num else ""


def match_site(row, q: str) -> bool:
    q_norm = digits(q)
    if not q_norm: return False
    site_norm = digits(_first(row, "Site#", "Site").strip())
    return site_norm == q_norm or pad_site(site_norm) == pad_site(q_norm)


def match_address(row, q: str) -> bool:
    parts = [_text(row[k]) for k in ("Service Address", "City", "State") if row.get(k)]
    return q.lower() in " ".join(parts).lower()


def match_city(row, q: str) -> bool:
    return q.lower() in _text(row.get("City") or "").lower()


def match_brand(row, q: str) -> bool:
    return q.lower() in _first(row, "Brand", "brand").lower()


def match_ip(row, q: str) -> bool:
    return q in _first(row, *IP_KEYS).strip()


MATCHERS = {
    "site": match_site,
    "address": match_address,
    "city": match_city,
    "brand": match_brand,
    "ip": match_ip,
}


def search_sites(sites: Iterable[Any], query, mode=None, limit: int = SEARCH_LIMIT) -> List[Dict[str, Any]]:
    q = _text(query).strip()
    if not q: return []
    mode = normalize_mode(mode)
    matcher = MATCHERS[mode]
    # site numbers are unique by convention; first hit wins
    cap = 1 if mode == "site" else limit
    out = []
    for row in sites or []:
        if not isinstance(row, dict):
            continue
        if matcher(row, q):
            out.append(row)
            if len(out) >= cap: break
    return out
