import codecs
import os
from dotenv import load_dotenv

load_dotenv() # Load variables from .env file

# --- Contract ---
# Not read from the environment: "no encoding given" always means UTF-8.
PREFERRED_ENCODING = "UTF-8"

# --- Defaults ---
BUFFER_SIZE_DEFAULT = 512
# Malformed input is replaced (U+FFFD on decode, '?' on encode), never raised.
ERRORS_DEFAULT = "replace"

# --- Loaded Config ---
try:
    DEFAULT_BUFFER_SIZE = int(os.getenv("CODEC_BUFFER_SIZE", str(BUFFER_SIZE_DEFAULT)))
except (ValueError, TypeError):
    DEFAULT_BUFFER_SIZE = BUFFER_SIZE_DEFAULT

if DEFAULT_BUFFER_SIZE <= 0:
    DEFAULT_BUFFER_SIZE = BUFFER_SIZE_DEFAULT

DEFAULT_ERRORS = os.getenv("CODEC_ERRORS", ERRORS_DEFAULT).strip() or ERRORS_DEFAULT
try:
    codecs.lookup_error(DEFAULT_ERRORS)
except LookupError:
    DEFAULT_ERRORS = ERRORS_DEFAULT
