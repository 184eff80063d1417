import shutil

MIN_WIDTH = 10
MAX_WIDTH = 200
DEFAULT_WIDTH = 100


def default_width() -> int:
    """Terminal width clamped to the range the front end accepts, DEFAULT_WIDTH if unknown."""
    columns = shutil.get_terminal_size((DEFAULT_WIDTH, 24)).columns
    return max(MIN_WIDTH, min(MAX_WIDTH, columns))
