import pytest

from gridsearch.errors import ScenarioFormatError
from gridsearch.file_reader import load_scenarios, parse_coordinate, parse_scenario_file


def write(tmp_path, text, name="case.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_parse_sectioned_file(cases_dir):
    scenario = parse_scenario_file(str(cases_dir / "centre_block.txt"))
    assert scenario.scenario_id == "centre_block"
    assert scenario.name == "Centre block"
    assert (scenario.rows, scenario.cols) == (3, 3)
    assert scenario.start == (0, 0)
    assert scenario.end == (2, 2)
    assert scenario.walls == [(1, 1)]
    assert scenario.difficulty == "easy"
    assert scenario.category == "obstacles"


def test_parse_map_file(cases_dir):
    scenario = parse_scenario_file(str(cases_dir / "narrow_corridor.txt"))
    assert (scenario.rows, scenario.cols) == (3, 10)
    assert scenario.start == (1, 0)
    assert scenario.end == (1, 9)
    assert len(scenario.walls) == 20
    assert scenario.category == "narrow"


def test_build_grid_places_walls_and_endpoints(cases_dir):
    scenario = parse_scenario_file(str(cases_dir / "centre_block.txt"))
    grid, start, end = scenario.build_grid()
    assert grid[1, 1].blocked
    assert start is grid.start_cell() and start.position == (0, 0)
    assert end is grid.end_cell() and end.position == (2, 2)


def test_parse_coordinate_accepts_parentheses():
    assert parse_coordinate("(3, 4)", "f", 1) == (3, 4)
    assert parse_coordinate(" 0,7 ", "f", 1) == (0, 7)


def test_comments_and_defaults(tmp_path):
    path = write(tmp_path, "# comment\n\n[grid]\n4, 5\n[WALLS]\n# none yet\n1, 1\n")
    scenario = parse_scenario_file(path)
    assert scenario.start == (0, 0)
    assert scenario.end == (3, 4)
    assert scenario.walls == [(1, 1)]
    assert scenario.name == "case"


@pytest.mark.parametrize("text, message", [
    ("[WALLS]\n1, 1\n", "missing"),
    ("[GRID]\n3\n", "expected 'row, col'"),
    ("[GRID]\n3, x\n", "integers"),
    ("[GRID]\n0, 3\n", "positive"),
    ("[GRID]\n3, 3\n[WALLS]\n5, 5\n", "outside"),
    ("[GRID]\n3, 3\n[START]\n1, 1\n[WALLS]\n1, 1\n", "cannot be walls"),
    ("[GRID]\n3, 3\n[START]\n0, 0\n[START]\n1, 1\n", "twice"),
    ("[GRID]\n3, 3\n[PORTALS]\n0, 0\n", "unknown section"),
    ("3, 3\n", "outside of a section"),
    ("[MAP]\nS..\n..\n", "columns"),
    ("[MAP]\nS.x\n..E\n", "unexpected map character"),
    ("[GRID]\n2, 2\n[MAP]\nS..\n..E\n", r"but \[MAP\]"),
])
def test_malformed_files_raise(tmp_path, text, message):
    with pytest.raises(ScenarioFormatError, match=message):
        parse_scenario_file(write(tmp_path, text))


def test_error_mentions_file_and_line(tmp_path):
    path = write(tmp_path, "[GRID]\n3, 3\n[WALLS]\nabc\n", name="broken.txt")
    with pytest.raises(ScenarioFormatError) as excinfo:
        parse_scenario_file(path)
    assert str(excinfo.value).startswith("broken.txt:4:")
    assert excinfo.value.line_no == 4


def test_load_scenarios_reads_folder_in_name_order(cases_dir):
    scenarios = load_scenarios(str(cases_dir))
    assert [s.scenario_id for s in scenarios] == [
        "centre_block", "maze", "narrow_corridor", "open_field", "sealed_row"]


def test_undecodable_file_raises_format_error(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"[GRID]\n3, 3\n\xff\xfe\n")
    with pytest.raises(ScenarioFormatError, match="not valid UTF-8") as excinfo:
        parse_scenario_file(str(path))
    assert excinfo.value.line_no is None
