from __future__ import annotations
import os
from dotenv import load_dotenv

load_dotenv()

TZ_NAME = os.getenv("HOSPITALITY_TZ", os.getenv("TZ", "America/New_York"))
SEED_DEMO_DATA = os.getenv("HOSPITALITY_SEED_DEMO", "1").strip().lower() not in ("0", "false", "no", "")
LOG_LEVEL = os.getenv("HOSPITALITY_LOG_LEVEL", "INFO").upper()
