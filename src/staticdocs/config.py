import os
from dotenv import load_dotenv

load_dotenv()

CONTENT_ROOT = os.getenv("STATICDOCS_ROOT", "assets/docs")
DEFAULT_LANG = os.getenv("STATICDOCS_DEFAULT_LANG", "en")
# Comma separated, empty means any language is accepted
LANGUAGES = os.getenv("STATICDOCS_LANGUAGES", "")

# Transport: "filesystem" reads under BASE_DIR, "http" fetches from BASE_URL
TRANSPORT = os.getenv("STATICDOCS_TRANSPORT", "filesystem")
BASE_DIR = os.getenv("STATICDOCS_BASE_DIR", ".")
BASE_URL = os.getenv("STATICDOCS_BASE_URL", "http://localhost:4200")
# Seconds; parsed when settings are built
TIMEOUT = os.getenv("STATICDOCS_TIMEOUT", "10")

NOT_FOUND_ROUTE = os.getenv("STATICDOCS_NOT_FOUND_ROUTE", "/not-found")
LOG_LEVEL = os.getenv("STATICDOCS_LOG_LEVEL", "WARNING")
