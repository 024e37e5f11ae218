import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "").upper()

# === Tag persistence ===
# Audio file field that holds an item's tag list, joined with TAG_SEPARATOR.
TAG_FIELD = os.getenv("MIXTAPE_TAG_FIELD", "genre")
TAG_SEPARATOR = os.getenv("MIXTAPE_TAG_SEPARATOR", ", ")
VIRTUALDJ_COMPAT = os.getenv("MIXTAPE_VIRTUALDJ_COMPAT", "").lower() in (
    "1",
    "true",
    "yes",
)

# === Item store ===
ITEM_STORE_PATH = os.getenv("MIXTAPE_ITEM_STORE_PATH", "mixtape_items.json")
ITEM_STORE_ROOT_KEY = "items"
