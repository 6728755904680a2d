from __future__ import annotations

import io
import json

from rich.console import Console

from households.core.pipeline import import_households, import_lines
from households.exporter import index_to_dict, write_json
from households.reporting import household_summary, is_adult, print_report, render_report
from households.utils import mock_file_path


def test_render_report_for_mock_file():
    index = import_households(mock_file_path("households_1.csv"), skip_header=False)

    assert render_report(index) == [
        "Current Households:",
        "Household: '123 Main St, Seattle, WA' has 3 total occupant(s)",
        "Adult occupant(s):",
        "\tJane, Doe, '123 Main St, Seattle, WA', 30",
        "\tJohn, Doe, '123 Main St, Seattle, WA', 25",
        "",
        "Household: '456 Elm St, Tacoma, WA' has 2 total occupant(s)",
        "Adult occupant(s):",
        "",
        "Household: '789 Oak Ave Apt 4, Spokane, WA' has 1 total occupant(s)",
        "Adult occupant(s):",
        "\tCarl, Zimmer, '789 Oak Ave Apt 4, Spokane, WA', 45",
        "",
    ]


def test_adult_threshold_is_eighteen():
    index = import_lines(
        [
            '"Kid","A","1 Main St","X","Y","17"',
            '"Grown","B","1 Main St","X","Y","18"',
            '"Baby","C","1 Main St","X","Y","0"',
        ]
    )
    (_, occupants), = index.entries()

    assert [is_adult(p) for p in occupants] == [False, True, False]
    assert household_summary(index) == {
        "households": 1,
        "occupants": 3,
        "adults": 1,
        "minors": 2,
    }


def test_render_report_empty_index():
    assert render_report(import_lines([])) == ["Current Households:"]


def test_print_report_does_not_interpret_markup():
    index = import_lines(['"[bold]Ann[/bold]","Lee","1 Main St","X","Y","30"'])
    buffer = io.StringIO()

    print_report(index, Console(file=buffer, width=40))

    assert "[bold]Ann[/bold], Lee" in buffer.getvalue()


def test_print_report_keeps_tabs_and_long_lines():
    index = import_lines(['"Ann","Lee","1 Main St","X","Y","30"'])
    buffer = io.StringIO()

    print_report(index, Console(file=buffer, width=20))

    assert buffer.getvalue() == "\n".join(render_report(index)) + "\n"
    assert "Adult occupant(s):\n\tAnn, Lee, '1 Main St, X, Y', 30\n" in buffer.getvalue()


def test_index_to_dict_keeps_order_and_counts():
    index = import_households(mock_file_path("households_1.csv"), skip_header=False)
    data = index_to_dict(index)

    assert data["counts"] == {"households": 3, "occupants": 6, "adults": 3, "minors": 3}
    first = data["households"][0]
    assert first["address"] == {"address_line": "123 Main St", "city": "Seattle", "state": "WA"}
    assert first["occupant_count"] == 3
    assert first["adult_count"] == 2
    assert [o["first_name"] for o in first["occupants"]] == ["Alice", "Jane", "John"]


def test_write_json_to_file(tmp_path):
    out = tmp_path / "nested" / "export.json"
    write_json({"a": 1}, out=out, pretty=True)

    assert json.loads(out.read_text(encoding="utf-8")) == {"a": 1}


def test_write_json_to_stdout(capsys):
    write_json({"a": [1, 2]})
    assert capsys.readouterr().out.strip() == '{"a":[1,2]}'
