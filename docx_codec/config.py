from __future__ import annotations

from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
OUTPUT_DIR = PROJECT_ROOT / "output"
LOG_DIR = PROJECT_ROOT / "logs"

LOG_FILE_PREFIX = "docx_codec"
LOG_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

XML_DECLARATION = "<?xml version='1.0' encoding='UTF-8' standalone='yes'?>\n"

DEFAULT_AUTHOR = "unnamed"
DEFAULT_DATE = "1970-01-01T00:00:00Z"
DEFAULT_PARA_ID_START = 1

DEFAULT_PAGE_WIDTH = 11906
DEFAULT_PAGE_HEIGHT = 16838
DEFAULT_PAGE_MARGIN = {
    "top": 1985,
    "right": 1701,
    "bottom": 1701,
    "left": 1701,
    "header": 851,
    "footer": 992,
    "gutter": 0,
}
DEFAULT_COLUMN_SPACE = 425
DEFAULT_TAB_STOP = 840
DEFAULT_ZOOM = 100

DEFAULT_BORDER_SIZE = 2
DEFAULT_BORDER_SPACE = 0
DEFAULT_BORDER_COLOR = "000000"

EMU_PER_PIXEL = 9525
EMU_PER_ROTATION_DEGREE = 60000
DEFAULT_RELATIVE_HEIGHT = 190500


def ensure_base_dirs() -> None:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    LOG_DIR.mkdir(parents=True, exist_ok=True)


def build_log_path(ts: datetime | None = None) -> Path:
    if ts is None:
        ts = datetime.now()
    name = f"{LOG_FILE_PREFIX}_{ts.strftime(LOG_TIMESTAMP_FORMAT)}.log"
    return LOG_DIR / name


def cleanup_logs(retention_days: int = 5, now: datetime | None = None) -> int:
    if retention_days <= 0:
        return 0
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        return 0
    base_time = now or datetime.now()
    cutoff = base_time.timestamp() - retention_days * 86400
    removed = 0
    for path in LOG_DIR.glob(f"{LOG_FILE_PREFIX}_*.log"):
        try:
            if path.stat().st_mtime < cutoff:
                path.unlink()
                removed += 1
        except OSError:
            continue
    return removed
