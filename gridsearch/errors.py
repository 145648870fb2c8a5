"""Exceptions raised by the grid search engine."""


class GridSearchError(Exception):
    """Base class for every error raised by gridsearch."""


class UnknownStrategy(GridSearchError, ValueError):
    """Raised when the runner is given a strategy name it does not know."""
    def __init__(self, name, valid_names):
        self.name = name
        self.valid_names = tuple(valid_names)
        super().__init__(f"Unknown strategy: {name!r} (expected one of {', '.join(self.valid_names)})")


class InvalidEndpoints(GridSearchError, ValueError):
    """Raised when the start/end cells handed to a search are unusable."""


class ScenarioFormatError(GridSearchError, ValueError):
    """Raised when a scenario file cannot be parsed."""
    def __init__(self, filename, line_no, message):
        self.filename = filename
        self.line_no = line_no
        where = f"{filename}:{line_no}" if line_no is not None else f"{filename}"
        super().__init__(f"{where}: {message}")
