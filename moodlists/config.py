from dotenv import load_dotenv
import os

load_dotenv()

# Base & data directories
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.getenv("MOODLISTS_DATA_DIR", os.path.join(BASE_DIR, "data"))

# Persisted user profiles (single JSON document)
USERS_FILE = os.getenv("MOODLISTS_USERS_FILE", os.path.join(DATA_DIR, "users.json"))

# Spotify credentials (REQUIRED, client-credentials flow)
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET")

# Spotify API constants
SPOTIFY_TOKEN_URL = os.getenv(
    "SPOTIFY_TOKEN_URL", "https://accounts.spotify.com/api/token"
)
SPOTIFY_API_BASE = os.getenv("SPOTIFY_API_BASE", "https://api.spotify.com/v1")
SPOTIFY_MARKET = os.getenv("SPOTIFY_MARKET", "US")
SPOTIFY_REQUEST_TIMEOUT = float(os.getenv("SPOTIFY_REQUEST_TIMEOUT", "10"))

# Playlists
DEFAULT_PLAYLIST_LENGTH = int(os.getenv("MOODLISTS_DEFAULT_PLAYLIST_LENGTH", "20"))
DEFAULT_SEARCH_LIMIT = 20

# API server
API_HOST = os.getenv("MOODLISTS_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("PORT", "3000"))

# Logging
LOG_LEVEL = os.getenv("MOODLISTS_LOG_LEVEL", "INFO")
