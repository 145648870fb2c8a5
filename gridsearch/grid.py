import math

from gridsearch import constants


class Cell:
    """Represents one position of the 2D grid together with its search state."""
    def __init__(self, row, col):
        self.row = int(row)
        self.col = int(col)
        self.blocked = False           # Permanent obstacle, set by the caller
        self.is_start = False
        self.is_end = False
        self.tentative_cost = math.inf # Cost from the start cell
        self.heuristic_cost = 0        # Estimated cost to the end cell
        self.total_priority = math.inf # tentative_cost + heuristic_cost
        self.predecessor = None        # Flat index of the cell we came from
        self.visited = False
        self.on_path = False

    @property
    def position(self):
        return (self.row, self.col)

    def reset_search_state(self):
        """Clears the per-search fields, leaving walls and endpoints alone."""
        self.tentative_cost = math.inf
        self.heuristic_cost = 0
        self.total_priority = math.inf
        self.predecessor = None
        self.visited = False
        self.on_path = False

    def __repr__(self):
        flags = "#" if self.blocked else ""
        if self.is_start:
            flags += "S"
        if self.is_end:
            flags += "E"
        return f"Cell({self.row},{self.col}){flags}"


class Grid:
    """Rectangular grid of cells stored as a flat list indexed by row * cols + col."""
    def __init__(self, rows, cols):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.rows = int(rows)
        self.cols = int(cols)
        self.cells = [Cell(r, c) for r in range(self.rows) for c in range(self.cols)]

    def __len__(self):
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, position):
        row, col = position
        return self.cell(row, col)

    def in_bounds(self, row, col):
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row, col):
        """Returns the cell at (row, col), raising IndexError outside the grid."""
        if not self.in_bounds(row, col):
            raise IndexError(f"({row},{col}) is outside a {self.rows}x{self.cols} grid")
        return self.cells[row * self.cols + col]

    def index_of(self, cell):
        return cell.row * self.cols + cell.col

    def owns(self, cell):
        """True when `cell` is the very object stored at its position in this grid."""
        return self.in_bounds(cell.row, cell.col) and self.cells[self.index_of(cell)] is cell

    # --- wall editing ---

    def set_wall(self, row, col, blocked=True):
        self.cell(row, col).blocked = bool(blocked)

    def toggle_wall(self, row, col):
        """Flips the wall flag of a cell. Start and end cells are never walled."""
        cell = self.cell(row, col)
        if cell.is_start or cell.is_end:
            return cell.blocked
        cell.blocked = not cell.blocked
        return cell.blocked

    def clear_walls(self):
        for cell in self.cells:
            cell.blocked = False

    def walls(self):
        return [cell.position for cell in self.cells if cell.blocked]

    # --- endpoints ---

    def set_start(self, row, col):
        """Moves the start flag to (row, col) and returns that cell."""
        target = self.cell(row, col)
        for cell in self.cells:
            cell.is_start = False
        target.is_start = True
        target.blocked = False
        return target

    def set_end(self, row, col):
        """Moves the end flag to (row, col) and returns that cell."""
        target = self.cell(row, col)
        for cell in self.cells:
            cell.is_end = False
        target.is_end = True
        target.blocked = False
        return target

    def start_cell(self):
        return next((cell for cell in self.cells if cell.is_start), None)

    def end_cell(self):
        return next((cell for cell in self.cells if cell.is_end), None)

    def render_text(self):
        """Returns an ASCII picture of the grid and of the last search run on it."""
        lines = []
        for r in range(self.rows):
            chars = []
            for cell in self.cells[r * self.cols:(r + 1) * self.cols]:
                if cell.is_start:
                    chars.append(constants.MAP_START)
                elif cell.is_end:
                    chars.append(constants.MAP_END)
                elif cell.blocked:
                    chars.append(constants.MAP_WALL)
                elif cell.on_path:
                    chars.append(constants.MAP_PATH)
                elif cell.visited:
                    chars.append(constants.MAP_VISITED)
                else:
                    chars.append(constants.MAP_OPEN)
            lines.append("".join(chars))
        return "\n".join(lines)


def create_grid(rows, cols):
    """Allocates a rows x cols grid with every cell in its default state."""
    return Grid(rows, cols)


def create_default_grid():
    """Builds the 20x40 editor grid with its start and end already placed."""
    grid = Grid(constants.GRID_ROWS, constants.GRID_COLS)
    grid.set_start(*constants.DEFAULT_START)
    grid.set_end(*constants.DEFAULT_END)
    return grid


def reset_search_state(grid):
    """Reinitializes the per-search fields of every cell in the grid."""
    for cell in grid.cells:
        cell.reset_search_state()
