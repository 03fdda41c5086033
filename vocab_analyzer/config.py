"""
Vocabulary Analyzer Configuration Module
Centralized configuration for the application.
"""

import os
from pathlib import Path

import yaml

# Debug Mode Configuration
DEBUG_MODE = os.environ.get('DEBUG', 'false').lower() == 'true'

# Application Paths
APP_NAME = "VocabularyAnalyzer"
APPDATA_DIR = Path(os.environ.get('APPDATA', os.path.expanduser('~/.config'))) / APP_NAME
LOGS_DIR = APPDATA_DIR / "logs"
CONFIG_DIR = APPDATA_DIR / "config"

# Data directory for the user's known words
DATA_DIR = APPDATA_DIR / "data"

# Ensure directories exist
for directory in [APPDATA_DIR, LOGS_DIR, CONFIG_DIR, DATA_DIR]:
    directory.mkdir(parents=True, exist_ok=True)

# Persisted State
KNOWN_WORDS_FILE = DATA_DIR / "known_words.json"
USER_PREFERENCES_FILE = CONFIG_DIR / "user_preferences.json"

# Bundled Data Files
BUNDLED_DATA_DIR = Path(__file__).parent / "data"
PHRASAL_VERBS_PATH = BUNDLED_DATA_DIR / "phrasal_verbs.txt"
DEFAULT_KNOWN_WORDS_PATH = BUNDLED_DATA_DIR / "default_known_words.txt"

# --- Settings Overrides ---
SETTINGS_FILE = BUNDLED_DATA_DIR / "settings.yaml"
SETTINGS = {}

def load_settings(settings_file: Path | None = None) -> dict:
    """Loads optional setting overrides from settings.yaml."""
    global SETTINGS
    path = Path(settings_file) if settings_file else SETTINGS_FILE
    try:
        with open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        SETTINGS = data if isinstance(data, dict) else {}
        if DEBUG_MODE and SETTINGS:
            from vocab_analyzer.logging_config import debug_log
            debug_log(f"[Config] Loaded {len(SETTINGS)} setting sections from {path}")
    except FileNotFoundError:
        if DEBUG_MODE:
            from vocab_analyzer.logging_config import debug_log
            debug_log(f"[Config] WARNING: Settings file not found at {path}. Using built-in defaults.")
        SETTINGS = {}
    except Exception as e:
        from vocab_analyzer.logging_config import debug_log
        debug_log(f"[Config] ERROR: Failed to load or parse settings file: {e}")
        SETTINGS = {}
    return SETTINGS

def get_setting(key: str, default=None):
    """
    Returns a setting by dotted key, falling back to the given default.

    Args:
        key: Dotted path into settings.yaml (e.g., 'rehearsal.interval_seconds').
        default: Value returned when the key is absent.

    Returns:
        The configured value or the default.
    """
    node = SETTINGS
    for part in key.split('.'):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node

# Load settings on module import
load_settings()
# --- End Settings Overrides ---


# Vocabulary Extraction
# Tokens shorter than this (after normalization) are discarded before counting.
# 2 = drop single letters ("A", "I", stray "S" from possessives)
MIN_TOKEN_LENGTH = get_setting('extraction.min_token_length', 2)

# Maximum ranked entries shown in the word grid (None = show everything)
VOCABULARY_DISPLAY_LIMIT = get_setting('extraction.display_limit', None)

# Accepted source files (informational, used by file dialogs only)
TEXT_FILE_EXTENSIONS = (".srt", ".txt", ".sub", ".md")
WORD_LIST_EXTENSIONS = (".json",)

# File Reading Limits
MAX_FILE_SIZE_MB = 50
LARGE_FILE_WARNING_MB = 10

# Rehearsal Defaults
REHEARSAL_DEFAULT_HOURS = get_setting('rehearsal.default_hours', 0)
REHEARSAL_DEFAULT_MINUTES = get_setting('rehearsal.default_minutes', 1)
REHEARSAL_DEFAULT_SECONDS = get_setting('rehearsal.default_seconds', 0)
REHEARSAL_DEFAULT_INTERVAL = get_setting('rehearsal.interval_seconds', 5)

# Timer tick period; the rehearsal scheduler counts one second per tick
TICK_PERIOD_MS = 1000

# Worker queue polling interval for the main window
QUEUE_POLL_MS = 100

# Logging Configuration
LOG_FILE = LOGS_DIR / "vocabulary_analyzer.log"
DEBUG_FLOW_FILE = LOGS_DIR / "debug_flow.txt"
LOG_FORMAT = "[%(levelname)s %(asctime)s] %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
