# Default editor grid
GRID_ROWS = 20
GRID_COLS = 40
DEFAULT_START = (10, 10)
DEFAULT_END = (10, 30)

# Folder holding the bundled scenario files
TEST_CASE_FOLDER = "Test_Cases_Grid"

STRATEGY_NAMES = ("dijkstra", "astar", "bfs", "dfs", "greedy")

METRICS_MODES = ("none", "stderr", "stdout")

# Characters used by the text map format and Grid.render_text()
MAP_WALL = "#"
MAP_OPEN = "."
MAP_START = "S"
MAP_END = "E"
MAP_PATH = "*"
MAP_VISITED = "o"
