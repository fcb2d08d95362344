from election_helpers.services.colors import DEFAULT_COLOR, PARTY_COLORS, get_party_color


def test_get_party_color_normalizes_labels():
    assert get_party_color("Republican") == PARTY_COLORS["R"]
    assert get_party_color("GOP") == PARTY_COLORS["R"]
    assert get_party_color("dem.") == PARTY_COLORS["D"]
    assert get_party_color("Green Party") == PARTY_COLORS["G"]


def test_get_party_color_defaults():
    assert get_party_color(None) == DEFAULT_COLOR
    assert get_party_color("   ") == DEFAULT_COLOR
    assert get_party_color("Zorp Party") == DEFAULT_COLOR
    assert get_party_color("Zorp Party", default="#000000") == "#000000"


def test_get_party_color_overrides():
    assert get_party_color("Republican", palette={"R": "#ff0000"}) == "#ff0000"
    assert get_party_color("Democrat", palette={"R": "#ff0000"}) == PARTY_COLORS["D"]
    assert get_party_color("Zorp", custom_map={"zorp": "G"}) == PARTY_COLORS["G"]
