import pytest

from dimquant.units.diagnostics import analyze_expressions
from dimquant.units.loader import build_symbol_table, load_definitions, load_definitions_file
from dimquant.units.si import SI_SYMBOLS, si_symbols


def test_analyze_expressions_reports_missing_and_parse_errors():
    quantities, canonical, diagnostics = analyze_expressions(
        {"speed": "10 m/s", "force": "kg m/s^2", "bad": "m//s", "empty": "  "}
    )
    assert set(quantities) == {"speed", "force"}
    assert canonical == {"force": "1 N", "speed": "10 m s^-1"}
    assert [(d.name, d.code) for d in diagnostics] == [("bad", "parse-error"), ("empty", "missing")]
    assert diagnostics[0].hint


def test_analyze_expressions_with_custom_table(toy_symbols):
    _, canonical, diagnostics = analyze_expressions({"x": "3 mm", "y": "1 N"}, toy_symbols)
    assert canonical == {"x": "0.003 m"}
    assert diagnostics[0].message == "Unknown unit symbol: 'N'"


def test_load_definitions_in_order():
    table = si_symbols()
    report = load_definitions(
        "Ki-: 1024\nB: 1\nkph: km/h\nknot: 1852 m/h\nfast: 2 knot\nbroken: 3 furlong",
        table,
    )
    assert report.prefixes == ["Ki"]
    assert report.units == ["B", "kph", "knot", "fast"]
    assert not report.ok
    assert report.diagnostics[0].name == "broken"
    assert table.lookup("KiB").raw_value == pytest.approx(1024)
    assert table.lookup("fast").raw_value == pytest.approx(2 * 1852 / 3600)


def test_units_may_not_refer_to_later_lines():
    table = si_symbols()
    report = load_definitions("a: 2 b\nb: 3 m", table)
    assert report.units == ["b"]
    assert report.diagnostics[0].name == "a"


def test_load_definitions_file_and_build_symbol_table(tmp_path):
    path = tmp_path / "units.txt"
    path.write_text("furlong: 201.168 m\n", encoding="utf-8")

    table = si_symbols()
    assert load_definitions_file(path, table).ok

    built = build_symbol_table(path)
    assert built.frozen
    assert built.lookup("furlong").raw_value == pytest.approx(201.168)
    assert "furlong" not in SI_SYMBOLS
    assert build_symbol_table() is SI_SYMBOLS
