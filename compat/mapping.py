"""Construction of base (model_code, sku) pairs.

Two sources feed the ``model_parts`` table:

- catalog descriptions carrying a parenthesized list of model codes,
  e.g. ``"Toner Black (C8130, C8135, C8145)"``;
- the manual overlay, for equipment whose descriptions carry no codes.

Both produce plain pairs; storage decides what is new.
"""

import logging
import re
from typing import Iterable, List, Mapping, Sequence, Set, Tuple

logger = logging.getLogger(__name__)

Pair = Tuple[str, str]

_PAREN_GROUP = re.compile(r"\(([^)]+)\)")


def parse_model_codes(description) -> List[str]:
    """Return the codes listed in the first ``(...)`` group, or ``[]``."""
    if not isinstance(description, str):
        return []
    match = _PAREN_GROUP.search(description)
    if not match:
        return []
    return [token.strip() for token in match.group(1).split(",") if token.strip()]


def build_base_mappings(parts: Iterable) -> List[Pair]:
    """One pair per listed code per part. ``parts`` need ``sku`` and ``description``."""
    pairs: List[Pair] = []
    for part in parts:
        for code in parse_model_codes(part.description):
            pairs.append((code, part.sku))
    return pairs


def materialize_manual_mappings(
    overlay: Mapping[str, Sequence[str]], known_skus: Set[str]
) -> List[Pair]:
    """Overlay pairs whose SKU is actually in the catalog."""
    pairs: List[Pair] = []
    for code, skus in overlay.items():
        for sku in skus:
            if sku in known_skus:
                pairs.append((code, sku))
            else:
                logger.debug("Overlay SKU %s for %s not stocked, skipped", sku, code)
    return pairs
