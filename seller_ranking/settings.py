import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
INPUT_DIR = BASE_DIR / os.getenv("INPUT_DIR", "input")
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")

# --- Filename Configuration ---
SALES_DATA_PREFIX = os.getenv("SALES_DATA_PREFIX", "sales_data_")
LEADERBOARD_FILENAME_BASE = os.getenv("LEADERBOARD_FILENAME", "seller_leaderboard")
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "true").lower() in ("1", "true", "yes")

# --- Webhook ---
WEBHOOK_URL = os.getenv("WEBHOOK_URL")

# --- Leaderboard Rules ---
# How many best-selling products are kept per seller in the final report.
TOP_PRODUCTS_LIMIT = int(os.getenv("TOP_PRODUCTS_LIMIT", "10"))

# Placeholder category for SKUs that are missing from the catalog.
UNKNOWN_CATEGORY = os.getenv("UNKNOWN_CATEGORY", "Unknown")
