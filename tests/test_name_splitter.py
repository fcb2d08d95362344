from election_helpers.config import SplitOptions
from election_helpers.name_splitter import NameSplit, split_name


def test_split_name_two_words():
    result = split_name("John Smith")
    assert result == NameSplit(first="John", last="Smith", confidence=0.9)
    assert result.as_dict() == {"first": "John", "last": "Smith", "confidence": 0.9}


def test_split_name_two_word_round_trip():
    for name in ("Ada Lovelace", "Grace Hopper", "Alexandria Ocasio-Cortez"):
        result = split_name(name)
        assert f"{result.first} {result.last}" == name


def test_split_name_comma_format():
    result = split_name("Smith, John")
    assert (result.first, result.last, result.confidence) == ("John", "Smith", 0.9)


def test_split_name_particles_join_last_name():
    result = split_name("Jean-Pierre de la Fontaine")
    assert result.first == "Jean-Pierre"
    assert result.last == "de la Fontaine"
    assert result.confidence == 0.85
    assert result.note == "Particle-based splitting: 3 particle words"


def test_split_name_leading_particle_pair():
    result = split_name("de Silva")
    assert (result.first, result.last, result.confidence) == ("", "de Silva", 0.8)
    assert result.note == "Particle detected"


def test_split_name_single_word():
    result = split_name("Madonna")
    assert (result.first, result.last, result.confidence) == ("Madonna", "", 0.3)
    assert result.note == "Single name detected"


def test_split_name_prefixes_and_suffixes():
    result = split_name("Dr. Jane Doe")
    assert (result.first, result.last, result.suffix) == ("Jane", "Doe", None)

    result = split_name("Martin Luther King Jr.")
    assert (result.first, result.last, result.suffix) == ("Martin Luther", "King", "Jr.")
    assert result.confidence == 0.7
    assert result.note == "Position-based split: 2 first, 1 last"


def test_split_name_without_main_parts():
    result = split_name("Jr.")
    assert result.confidence == 0.2
    assert result.error == "No main name parts found"
    assert result.last == "Jr."
    assert "note" not in result.as_dict()


def test_split_name_long_names_lower_confidence():
    result = split_name("Anna Maria Luisa Garcia Lopez Rivera")
    assert result.first == "Anna Maria Luisa Garcia"
    assert result.last == "Lopez Rivera"
    assert abs(result.confidence - 0.7 * 0.8 * 0.7) < 1e-9
    assert result.confidence < SplitOptions().confidence_threshold


def test_split_name_options():
    result = split_name("Jean-Pierre de la Fontaine", {"keep_particles": False})
    assert (result.first, result.last, result.confidence) == ("Jean-Pierre de", "la Fontaine", 0.7)

    result = split_name("John Smith Jr", SplitOptions(handle_suffixes=False))
    assert (result.first, result.last, result.suffix) == ("John Smith", "Jr", None)

    result = split_name("Anna Maria Luisa Garcia Lopez", {"max_first_names": 3})
    assert abs(result.confidence - 0.7 * 0.7) < 1e-9


def test_split_name_rejects_empty_and_non_strings():
    for value in ("", "   "):
        try:
            split_name(value)
        except ValueError as exc:
            assert "empty" in str(exc)
        else:
            raise AssertionError(f"Expected ValueError for {value!r}")
    try:
        split_name(None)
    except TypeError as exc:
        assert "NoneType" in str(exc)
    else:
        raise AssertionError("Expected TypeError for None")
