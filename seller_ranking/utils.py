import json
import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_DATE_IN_NAME = re.compile(r"(\d{4}-\d{2}-\d{2})")


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def find_latest_report(input_dir: Path, prefix: str) -> tuple[Path, date] | None:
    """
    Finds the newest file in `input_dir` whose name starts with `prefix`.
    The date is read from a YYYY-MM-DD stamp in the filename, falling back to
    the file's modification time when the name has none.
    """
    if not input_dir.is_dir():
        return None

    candidates = []
    for path in input_dir.glob(f"{prefix}*"):
        if not path.is_file():
            continue
        match = _DATE_IN_NAME.search(path.name)
        if match:
            try:
                file_date = datetime.strptime(match.group(1), "%Y-%m-%d").date()
            except ValueError:
                file_date = date.fromtimestamp(path.stat().st_mtime)
        else:
            file_date = date.fromtimestamp(path.stat().st_mtime)
        candidates.append((file_date, path.name, path))

    if not candidates:
        return None

    file_date, _, path = max(candidates)
    return path, file_date


def load_json(file_path: Path) -> Any | None:
    """
    JSON loader with the same encoding fallback as our CSV loading:
    1. UTF-8 with BOM support ('utf-8-sig').
    2. Latin-1, which can decode any byte sequence.
    Returns None (and logs why) when the file is missing or not valid JSON.
    """
    try:
        with open(file_path, encoding="utf-8-sig") as f:
            return json.load(f)

    except UnicodeDecodeError:
        logger.info(
            f"INFO: UTF-8 decoding failed for {file_path.name}. Retrying with 'latin-1'."
        )
        try:
            with open(file_path, encoding="latin-1") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e_latin1:
            logger.error(
                f"ERROR: Could not read {file_path.name} even with latin-1. Reason: {e_latin1}"
            )
            return None

    except FileNotFoundError:
        logger.info(f"INFO: Input not found at {file_path}, skipping.")
        return None

    except (OSError, json.JSONDecodeError) as e_general:
        logger.error(
            f"ERROR: An unexpected error occurred while reading {file_path.name}. Reason: {e_general}"
        )
        return None
