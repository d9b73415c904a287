from dimquant.parser.units_text import parse_units_text


def test_parse_units_text_tolerates_comments_and_commas():
    text = """
    kph: km/h
    knot: 1852 m/h   # nautical mile per hour
    bar: 100 kPa,
    # ignored
    bad line
    : missing
    """

    result = parse_units_text(text)
    assert result.units == {"kph": "km/h", "knot": "1852 m/h", "bar": "100 kPa"}
    assert len(result.warnings) == 2
    assert "missing ':'" in result.warnings[0]
    assert "empty symbol" in result.warnings[1]


def test_prefix_lines():
    result = parse_units_text("Ki-: 1024\nMi -: 1048576;\nbad-: lots")
    assert result.prefixes == {"Ki": 1024.0, "Mi": 1048576.0}
    assert result.units == {}
    assert len(result.warnings) == 1
    assert "needs a number" in result.warnings[0]


def test_symbols_with_whitespace_and_empty_definitions_warn():
    result = parse_units_text("two words: m\nempty:   # nothing")
    assert result.units == {}
    assert "contains whitespace" in result.warnings[0]
    assert "empty definition for 'empty'" in result.warnings[1]


def test_parse_units_text_empty_input():
    result = parse_units_text(None)
    assert result.units == {}
    assert result.prefixes == {}
    assert result.warnings == []
