import pytest

from compat.model_codes import UNKNOWN_CODE, ModelCodeExtractor
from compat.tables import load_model_patterns
from config import Config


@pytest.fixture(scope="module")
def extractor():
    return load_model_patterns(Config.MODEL_NAME_PATTERNS_PATH)


@pytest.mark.parametrize("name, code", [
    ("Xerox AltaLink C8145 MFP", "C8145"),
    ("Xerox AltaLink C8135", "C8135"),
    ("Xerox VersaLink B625 MFP", "B625"),
    ("Xerox WorkCentre 7835", "WC7835"),
    ("Xerox Phaser 3320", "Phaser3320"),
    ("HP Designjet T920 36in", "T920"),
])
def test_known_models(extractor, name, code):
    assert extractor.extract(name) == code


def test_falls_back_to_first_token(extractor):
    assert extractor.extract("Unknown Device X1") == "Unknown"
    assert extractor.extract("  Brother   HL-L2350 ") == "Brother"


@pytest.mark.parametrize("name", [None, "", "   "])
def test_blank_name_is_unknown(extractor, name):
    assert extractor.extract(name) == UNKNOWN_CODE == "UNKNOWN"


def test_non_string_cells_are_converted(extractor):
    assert extractor.extract(3320) == "3320"


def test_specific_fragment_wins_over_family_prefix():
    extractor = ModelCodeExtractor([
        ("VersaLink B6", "B6xx"),
        ("VersaLink B605", "B605"),
    ])
    assert extractor("Xerox VersaLink B605 MFP") == "B605"
    assert extractor("Xerox VersaLink B600") == "B6xx"


def test_equal_length_fragments_keep_declared_order():
    extractor = ModelCodeExtractor([("AAA", "first"), ("BBB", "second")])
    assert extractor("AAA BBB") == "first"
    assert [code for _, code in extractor.patterns] == ["first", "second"]


def test_matching_is_case_sensitive(extractor):
    assert extractor.extract("XEROX ALTALINK C8145") == "XEROX"
    assert extractor.extract("Xerox altalink C8145") == "Xerox"
