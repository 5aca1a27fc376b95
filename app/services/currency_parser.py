from __future__ import annotations

from typing import List, Optional


def parse_currency_list(raw: Optional[str]) -> List[str]:
    """Split comma separated text into upper-cased currency codes.

    Blank tokens are dropped; order and duplicates are kept as typed.
    ``"AED, ars ,, AUD"`` -> ``["AED", "ARS", "AUD"]``.
    """
    if not raw:
        return []
    codes = (token.strip().upper() for token in raw.split(","))
    return [code for code in codes if code]
