import logging

from pydantic import ValidationError

from election_helpers.config import NameCleanConfig
from election_helpers.names import (
    NameConflict,
    clean_candidate_name,
    clean_candidate_names,
    detect_profanity,
    is_non_candidate,
)


def test_clean_candidate_name_reorders_comma_form():
    assert clean_candidate_name("smith, john") == "John Smith"
    assert clean_candidate_name("SMITH,JOHN") == "John Smith"


def test_clean_candidate_name_title_case_rules():
    assert clean_candidate_name("JOHN SMITH JR.") == "John Smith Jr."
    assert clean_candidate_name("jean de la fontaine") == "Jean de la Fontaine"
    assert clean_candidate_name("mary-jane o'brien") == "Mary-Jane O'Brien"
    assert clean_candidate_name("  John    Smith  ") == "John Smith"
    assert clean_candidate_name("Dr. Jane Doe") == "Dr. Jane Doe"


def test_clean_candidate_name_strips_stray_periods():
    assert clean_candidate_name("John Q. Public") == "John Q Public"
    assert clean_candidate_name("John Q. Public", {"separators": {"periods": "keep"}}) == "John Q. Public"


def test_clean_candidate_name_capitalization_policies():
    assert clean_candidate_name("María José", {"capitalize": "preserve"}) == "María José"
    assert clean_candidate_name("john smith", {"capitalize": "upper"}) == "JOHN SMITH"
    assert clean_candidate_name("John Smith", {"capitalize": "lower"}) == "john smith"


def test_clean_candidate_name_comma_policies():
    assert clean_candidate_name("Smith, John", {"separators": {"commas": "keep"}}) == "Smith, John"
    assert clean_candidate_name("Smith, John", {"separators": {"commas": "remove"}}) == "Smith John"


def test_clean_candidate_name_accepts_model_instance():
    config = NameCleanConfig(capitalize="upper")
    assert clean_candidate_name("ada lovelace", config) == "ADA LOVELACE"


def test_non_candidate_rows_become_none():
    for value in ("TOTAL VOTES", "Total", "Write-In", "WRITE IN", "N/A", "12345", "---", "Blank ballots", "Others"):
        assert clean_candidate_name(value) is None, value


def test_real_names_are_not_non_candidates():
    for value in ("John Smith", "Maria Garcia", "Total Smith", "Jean Blank"):
        assert not is_non_candidate(value), value


def test_non_candidate_detection_can_be_disabled():
    assert clean_candidate_name("Write-In", {"detect_non_candidates": False}) == "Write-In"


def test_clean_candidate_name_empty_and_none():
    assert clean_candidate_name(None) is None
    assert clean_candidate_name("") is None
    assert clean_candidate_name("   ") is None


def test_clean_candidate_name_rejects_non_strings():
    try:
        clean_candidate_name(42)
    except TypeError as exc:
        assert "int" in str(exc)
    else:
        raise AssertionError("Expected TypeError for int name")


def test_clean_candidate_name_rejects_bad_options():
    try:
        clean_candidate_name("John Smith", {"capitalize": "shout"})
    except ValidationError as exc:
        assert "capitalize" in str(exc)
    else:
        raise AssertionError("Expected ValidationError for unknown capitalize mode")


def test_detect_profanity():
    check = detect_profanity("Deez Nuts")
    assert check.has_profanity
    assert check.matches == ("deez", "nuts")
    assert not detect_profanity("Jane Doe").has_profanity
    assert not detect_profanity(None).has_profanity


def test_profanity_is_logged_but_kept_by_default(caplog):
    logger = logging.getLogger("test.names.profanity")
    with caplog.at_level(logging.WARNING, logger="test.names.profanity"):
        result = clean_candidate_name("John Fuckface", logger=logger)
    assert result == "John Fuckface"
    assert "fuckface" in caplog.text


def test_profanity_censoring_is_opt_in(caplog):
    logger = logging.getLogger("test.names.censor")
    config = {"security": {"censor_profanity": True}}
    with caplog.at_level(logging.WARNING, logger="test.names.censor"):
        result = clean_candidate_name("John Fuckface", config, logger=logger)
    assert result == "John ********"
    assert caplog.records


def test_clean_candidate_names_reports_conflicts_and_placeholders():
    result = clean_candidate_names(
        ["John Smith", "JOHN SMITH", "smith, john", "TOTAL VOTES", "Jane Doe", None]
    )
    assert result.cleaned == ["John Smith", "Jane Doe"]
    assert result.conflicts == [
        NameConflict(cleaned="John Smith", originals=("John Smith", "JOHN SMITH", "smith, john"))
    ]
    assert result.non_candidates == ["TOTAL VOTES", None]


def test_clean_candidate_names_number_strategy():
    result = clean_candidate_names(
        ["John Smith", "john smith", "Jane Doe", "JOHN SMITH"],
        {"conflict_strategy": "number"},
    )
    assert result.cleaned == ["John Smith", "John Smith (2)", "Jane Doe", "John Smith (3)"]
    assert len(result.conflicts) == 1
    payload = result.as_dict()
    assert payload["conflicts"][0]["originals"] == ["John Smith", "john smith", "JOHN SMITH"]


def test_clean_candidate_names_rejects_non_lists():
    for value in ("John Smith", None, 3):
        try:
            clean_candidate_names(value)
        except TypeError:
            pass
        else:
            raise AssertionError(f"Expected TypeError for {value!r}")
