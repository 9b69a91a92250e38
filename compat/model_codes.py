"""Model code extraction from free-text printer model names."""

from typing import Iterable, Sequence, Tuple

UNKNOWN_CODE = "UNKNOWN"


class ModelCodeExtractor:
    """
    Maps a model name such as ``"Xerox AltaLink C8145 MFP"`` to ``"C8145"``.

    Patterns are ``(fragment, code)`` pairs. Matching is a case-sensitive
    substring test; longer fragments are tried first so a family prefix never
    shadows a more specific sibling. Ties keep the declared order.
    """

    def __init__(self, patterns: Iterable[Sequence[str]]):
        pairs = [(str(fragment), str(code)) for fragment, code in patterns]
        # sorted() is stable, equal lengths keep file order
        self._patterns: Tuple[Tuple[str, str], ...] = tuple(
            sorted(pairs, key=lambda p: len(p[0]), reverse=True)
        )

    @property
    def patterns(self) -> Tuple[Tuple[str, str], ...]:
        return self._patterns

    def extract(self, model_name) -> str:
        if model_name is None:
            return UNKNOWN_CODE
        name = str(model_name).strip()
        if not name:
            return UNKNOWN_CODE

        for fragment, code in self._patterns:
            if fragment and fragment in name:
                return code

        return name.split()[0]

    __call__ = extract

    def __len__(self) -> int:
        return len(self._patterns)
