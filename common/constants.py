import os
from pathlib import Path

# Project root = .../league_report
APP_ROOT = Path(__file__).resolve().parents[1]

DEFAULT_DATA_DIR      = APP_ROOT / "data"
DEFAULT_GRID_FILE     = "results_grid.csv"
DEFAULT_TEAMS_FILE    = "teams.csv"
DEFAULT_LISTINGS_FILE = "car_listings.csv"

SCORE_DELIMITER  = "-"
POINTS_WIN       = 3
POINTS_DRAW      = 1
POINTS_LOSS      = 0

OUTLIER_K        = 1.5          # Tukey fence multiplier
MISSING_LABEL    = "(missing)"

LISTING_NUMERIC_COLUMNS  = ["price", "mileage", "year", "engine_size"]
LISTING_CATEGORY_COLUMNS = ["make", "fuel_type", "transmission", "body_type"]

STANDINGS_COLUMNS = {
    "rank": "Pos",
    "display_name": "Team",
    "points": "Pts",
    "goal_diff": "GD",
    "goals_for": "GF",
    "goals_against": "GA",
}


# ----- Config (env or defaults), read at call time so `.env` is honoured -----
def data_dir() -> Path:
    return Path(os.getenv("REPORT_DATA_DIR", str(DEFAULT_DATA_DIR)))

def grid_path() -> Path:
    return data_dir() / os.getenv("REPORT_GRID_FILE", DEFAULT_GRID_FILE)

def teams_path() -> Path:
    return data_dir() / os.getenv("REPORT_TEAMS_FILE", DEFAULT_TEAMS_FILE)

def listings_path() -> Path:
    return data_dir() / os.getenv("REPORT_LISTINGS_FILE", DEFAULT_LISTINGS_FILE)

def log_level() -> str:
    return os.getenv("REPORT_LOG_LEVEL", "INFO").upper()

def outlier_k() -> float:
    return float(os.getenv("REPORT_OUTLIER_K", str(OUTLIER_K)))

def zone_sizes() -> dict[str, int]:
    return {
        "title": int(os.getenv("REPORT_TITLE_SPOTS", "1")),
        "continental": int(os.getenv("REPORT_CONTINENTAL_SPOTS", "4")),
        "relegation": int(os.getenv("REPORT_RELEGATION_SPOTS", "3")),
    }
