import os

from gridsearch import constants
from gridsearch.errors import ScenarioFormatError
from gridsearch.scenarios import Scenario

SECTIONS = ("[GRID]", "[START]", "[END]", "[WALLS]", "[MAP]", "[META]")


def parse_coordinate(line, filename, line_no):
    """Parses 'row, col' (parentheses optional) into an (int, int) tuple."""
    parts = [p.strip() for p in line.strip().strip("()").split(",")]
    if len(parts) != 2:
        raise ScenarioFormatError(filename, line_no, f"expected 'row, col', got '{line}'")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ScenarioFormatError(filename, line_no, f"coordinates must be integers, got '{line}'") from None


def parse_scenario_file(path):
    """Parses a grid scenario file.

    Args:
        path (string): Filepath to the scenario txt file

    Returns:
        Scenario: dimensions, endpoints, walls and meta information of the file

    Raises:
        ScenarioFormatError: the file is malformed or refers to cells outside the grid
    """
    filename = os.path.basename(path)
    section = None
    rows = cols = None
    start = end = None
    walls = []
    map_rows = []
    meta = {}

    def is_header(line):
        return line.startswith("[") and line.endswith("]")

    def ignore(line):
        return (not line) or line.startswith("#")

    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except UnicodeDecodeError:
        raise ScenarioFormatError(filename, None, "file is not valid UTF-8") from None

    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if is_header(line):
            section = line.upper()
            if section not in SECTIONS:
                raise ScenarioFormatError(filename, line_no, f"unknown section {line}")
            continue

        # Walls are drawn with '#', so map rows are never comments
        if section == "[MAP]":
            if line:
                map_rows.append((line_no, line))
            continue
        if ignore(line):
            continue

        if section == "[GRID]":
            rows, cols = parse_coordinate(line, filename, line_no)
            if rows <= 0 or cols <= 0:
                raise ScenarioFormatError(filename, line_no, f"grid size must be positive, got {rows}x{cols}")

        elif section == "[START]":
            if start is not None:
                raise ScenarioFormatError(filename, line_no, "start cell given twice")
            start = parse_coordinate(line, filename, line_no)

        elif section == "[END]":
            if end is not None:
                raise ScenarioFormatError(filename, line_no, "end cell given twice")
            end = parse_coordinate(line, filename, line_no)

        elif section == "[WALLS]":
            walls.append(parse_coordinate(line, filename, line_no))

        elif section == "[META]":
            p = [x.strip() for x in line.split(",", 1)]
            meta[p[0].upper()] = p[1] if len(p) > 1 else ""

        else:
            raise ScenarioFormatError(filename, line_no, f"data outside of a section: '{line}'")

    if map_rows:
        width = len(map_rows[0][1])
        if rows is not None and (rows, cols) != (len(map_rows), width):
            raise ScenarioFormatError(
                filename, None, f"[GRID] says {rows}x{cols} but [MAP] is {len(map_rows)}x{width}"
            )
        rows, cols = len(map_rows), width
        for r, (line_no, text) in enumerate(map_rows):
            if len(text) != width:
                raise ScenarioFormatError(filename, line_no, f"map row has {len(text)} columns, expected {width}")
            for c, ch in enumerate(text):
                if ch == constants.MAP_WALL:
                    walls.append((r, c))
                elif ch == constants.MAP_START:
                    if start is not None:
                        raise ScenarioFormatError(filename, line_no, "start cell given twice")
                    start = (r, c)
                elif ch == constants.MAP_END:
                    if end is not None:
                        raise ScenarioFormatError(filename, line_no, "end cell given twice")
                    end = (r, c)
                elif ch != constants.MAP_OPEN:
                    raise ScenarioFormatError(filename, line_no, f"unexpected map character '{ch}'")

    if rows is None:
        raise ScenarioFormatError(filename, None, "missing [GRID] or [MAP] section")

    if start is None:
        start = (0, 0)
    if end is None:
        end = (rows - 1, cols - 1)

    def check_bounds(label, position):
        r, c = position
        if not (0 <= r < rows and 0 <= c < cols):
            raise ScenarioFormatError(filename, None, f"{label} {position} is outside the {rows}x{cols} grid")

    check_bounds("start", start)
    check_bounds("end", end)
    for wall in walls:
        check_bounds("wall", wall)
    if start in walls or end in walls:
        raise ScenarioFormatError(filename, None, "start and end cells cannot be walls")

    return Scenario(
        scenario_id=os.path.splitext(filename)[0],
        name=meta.get("NAME", os.path.splitext(filename)[0]),
        description=meta.get("DESCRIPTION", ""),
        rows=rows,
        cols=cols,
        start=start,
        end=end,
        walls=walls,
        difficulty=meta.get("DIFFICULTY", "easy").lower(),
        category=meta.get("CATEGORY", "open").lower(),
    )


def load_scenarios(folder=constants.TEST_CASE_FOLDER):
    """Loads every .txt scenario in `folder`, sorted by file name."""
    available_files = sorted(f for f in os.listdir(folder) if f.endswith(".txt"))
    return [parse_scenario_file(os.path.join(folder, f)) for f in available_files]
