"""Dev Summit site configuration — loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# Root of the site package; every content path below hangs off it
SITE_ROOT = Path(__file__).resolve().parent

# Jinja2 template directories
SECTIONS_DIR = SITE_ROOT / "sections"
LAYOUTS_DIR = SITE_ROOT / "templates"
PARTIALS_DIR = SITE_ROOT / "partials"
SECTION_EXTENSION = ".html"

# Static assets
STATIC_DIR = SITE_ROOT / "static"   # app.yaml serves this in prod
SRC_DIR = SITE_ROOT / "src"         # actual source folder
RES_DIR = SITE_ROOT / "res"         # runtime build assets

# Schedule data
SCHEDULE_PATH = SITE_ROOT / "schedule.json"

# AMP stylesheet: LESS entry point and the precompiled prod artifact
AMP_LESS_ENTRY = STATIC_DIR / "styles" / "amp.less"
AMP_CSS_ARTIFACT = RES_DIR / "amp.css"

# Search console verification file served from the top level
VERIFICATION_FILE = "googlec6dfdf23945d0d0c.html"

# Environment
SITE_ENV = os.environ.get("SITE_ENV", "development")
IS_PROD = SITE_ENV == "production"

# Render context constants
SITE_YEAR = int(os.environ.get("SITE_YEAR", "2018"))
GA_TRACKING_ID = os.environ.get("GA_TRACKING_ID", "UA-41980257-1")
ADWORDS_CONVERSION_ID = int(os.environ.get("ADWORDS_CONVERSION_ID", "935743779"))

# Server
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))
