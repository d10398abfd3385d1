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

# --- Filename Configuration ---
COLLECTION_FILENAME = os.getenv("COLLECTION_FILENAME", "collection.json")
COLLECTION_SUBJECT = "game-collection"
WISHLIST_SUBJECT = "game-wishlist"

# --- Webhook ---
WEBHOOK_URL = os.getenv("WEBHOOK_URL")

# --- Feature Flags ---
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "true").lower() == "true"
# An explicit "0" average is normally indistinguishable from "no data".
KEEP_ZERO_PRICES = os.getenv("KEEP_ZERO_PRICES", "false").lower() == "true"

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() == "true"
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")
LOG_FILENAME = os.getenv("LOG_FILENAME", "gamevault.log")

# --- Shared Business Logic ---
# Marketplace sources in the order they appear in exported files.
# `key` is matched case-insensitively as a substring of a price's source.
# `short_names` match older export headers such as "eBay Price (Low)", as long
# as the header cell names no other source's key.
MARKETPLACE_SOURCES = [
    {"key": "ebay.com", "label": "eBay.com", "currency": "USD", "short_names": ["ebay"]},
    {"key": "ricardo.ch", "label": "Ricardo.ch", "currency": "CHF", "short_names": ["ricardo"]},
    {"key": "anibis.ch", "label": "Anibis.ch", "currency": "CHF", "short_names": ["anibis"]},
    {"key": "ebay.fr", "label": "eBay.fr", "currency": "EUR", "short_names": []},
]
