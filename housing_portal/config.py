"""
Application configuration settings.
"""
import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env file if it exists (for local development)
env_file = BASE_DIR / ".env"
if env_file.exists():
    with open(env_file) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#') and '=' in line:
                key, value = line.split('=', 1)
                os.environ.setdefault(key.strip(), value.strip())

# Database - Support both SQLite (local) and PostgreSQL (production)
DATABASE_URL = os.getenv("DATABASE_URL", "")
DATABASE_PATH = Path(os.getenv("DATABASE_PATH", str(BASE_DIR / "housing_portal.db")))

# Determine if using PostgreSQL
USE_POSTGRES = DATABASE_URL.startswith("postgres")

# Hosted Postgres URLs use postgres:// but psycopg2 needs postgresql://
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Seed data files
OFFICER_DATA_FILE = BASE_DIR / "Officer Data.xlsx"
BENEFICIARY_DATA_FILE = BASE_DIR / "Beneficiary Data.xlsx"

# Record collections (one table each)
BENEFICIARIES_TABLE = "beneficiaries"
PENDING_ENTRIES_TABLE = "pending_entries"
OFFICERS_TABLE = "officers"

# Id allocation: next id = max(existing ids, base) + 1
# Pending entries start above the seed data range
PENDING_ID_BASE = 100
BENEFICIARY_ID_BASE = 0
OFFICER_ID_BASE = 0

# Construction stages, in progress-weighting order
CONSTRUCTION_STAGES = ["foundation", "walls", "roof", "finishing"]

# Per-stage status options
STAGE_STATUS_OPTIONS = [
    "Not Started",
    "In Progress",
    "Completed",
    "Delayed"
]

# Stage labels shown on a beneficiary record
STAGE_LABELS = [
    "Not Started",
    "Foundation",
    "Walls",
    "Roof",
    "Finishing",
    "Completed",
    "Delayed"
]
DEFAULT_STAGE_LABEL = "Not Started"

# Pending entry update types (absent = new beneficiary)
UPDATE_TYPES = ["edit", "progress"]

# Intake defaults
DEFAULT_SUBMITTER = "Unknown"
DEFAULT_PROGRESS_STRATEGY = "weighted_stage"

# Progress formula constants
IN_PROGRESS_CREDIT = 15           # weighted_stage: points per stage in progress
COMPLETED_WEIGHT_PERCENT = 70     # split_weight: share earned by completed stages
IN_PROGRESS_WEIGHT_PERCENT = 30   # split_weight: share earned (at half) by stages in progress

# Currency prefix used when re-deriving remaining funds
CURRENCY_PREFIX = "Rs."
