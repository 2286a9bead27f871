import os
from dotenv import load_dotenv
import logging

# Load environment variables from .env file in the project root
# Assumes config.py is in 'src/' and .env is in the parent directory.
dotenv_path = os.path.join(os.path.dirname(__file__), '..', '.env')
load_dotenv(dotenv_path=dotenv_path)

logger = logging.getLogger(__name__)

# --- API Keys ---
OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY")

if not OPENAI_API_KEY:
    logger.error("API key is missing. Ensure OPENAI_API_KEY is set.")

# --- File Paths ---
# Project root is the directory containing 'src/' and '.env'
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DEFAULT_OUTPUT_DIR = os.path.join(PROJECT_ROOT, "output")

# Path for the log file
LOG_FILE_PATH = os.path.join(DEFAULT_OUTPUT_DIR, "ordskatt.log")

# --- OpenAI API Parameters ---
GPT_MODEL = os.environ.get("ORDSKATT_TEXT_MODEL", "gpt-4o")
SPECIFIC_WORD_TEMPERATURE = 0.4
RANDOM_WORD_TEMPERATURE = 1.2  # High temperature for variety
MAX_COMPLETION_TOKENS = 2048
IMAGE_GENERATION_MODEL = os.environ.get("ORDSKATT_IMAGE_MODEL", "gpt-image-1")
IMAGE_SIZE = "1536x1024"  # closest supported size to 4:3
IMAGE_QUALITY = "low"

# --- Logging ---
LOG_LEVEL = os.environ.get("ORDSKATT_LOG_LEVEL", "INFO")  # e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# --- User-facing copy ---
GENERATION_ERROR_MESSAGE = "Fant ikke ordet eller noe gikk galt med AI-genereringen. Prøv igjen."


# Helper function to ensure a directory exists
def _ensure_dir_exists(file_path: str):
    directory = os.path.dirname(file_path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory)


def setup_logging(log_file_path: str = LOG_FILE_PATH, level: str = LOG_LEVEL) -> None:
    """Configure the root logger with a file and a stream handler.

    Does nothing if the root logger already has handlers.
    """
    if logging.getLogger().handlers:
        return
    _ensure_dir_exists(log_file_path)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file_path, encoding='utf-8'),
            logging.StreamHandler()
        ]
    )
