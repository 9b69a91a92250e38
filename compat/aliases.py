"""Static alias table between model codes."""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Sequence, Set

_EMPTY: FrozenSet[str] = frozenset()


class AliasTable:
    """
    Directed, hand-curated alias edges: code -> codes sharing its consumables.

    Edges are used exactly as declared. Nothing here assumes the relation is
    symmetric or transitive, so both directions are exposed separately:
    ``aliases(code)`` follows edges out of ``code`` and ``referrers(code)``
    finds the keys whose list contains ``code``.
    """

    def __init__(self, edges: Mapping[str, Sequence[str]]):
        forward: Dict[str, FrozenSet[str]] = {}
        reverse: Dict[str, Set[str]] = {}
        for source, targets in edges.items():
            forward[source] = frozenset(targets)
            for target in targets:
                reverse.setdefault(target, set()).add(source)

        self._forward = MappingProxyType(forward)
        self._reverse = MappingProxyType({k: frozenset(v) for k, v in reverse.items()})

    def aliases(self, code: str) -> FrozenSet[str]:
        return self._forward.get(code, _EMPTY)

    def referrers(self, code: str) -> FrozenSet[str]:
        return self._reverse.get(code, _EMPTY)

    def expand(self, code: str) -> Set[str]:
        """Codes searched for a printer of model ``code``: itself plus one hop."""
        return {code} | self.aliases(code)

    def expand_reverse(self, code: str) -> Set[str]:
        """
        Printer codes reachable from a part mapped to ``code``: itself plus
        every code whose alias list names it. Edges out of ``code`` are not
        followed; a part listed for ``A`` with ``A -> [B]`` does not reach
        ``B`` printers unless ``B`` names ``A`` in turn.
        """
        return {code} | self.referrers(code)

    def expand_reverse_all(self, codes: Iterable[str]) -> Set[str]:
        out: Set[str] = set()
        for code in codes:
            out |= self.expand_reverse(code)
        return out

    def __contains__(self, code) -> bool:
        return code in self._forward

    def __len__(self) -> int:
        return len(self._forward)
