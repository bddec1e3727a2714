import uvicorn

from moodlists.api.fastapi_app import app
from moodlists.config import API_HOST, API_PORT
from moodlists.core import log_info

__all__ = ["app"]

if __name__ == "__main__":
    log_info(f"Moodlists API running on http://{API_HOST}:{API_PORT}")
    log_info("Make sure SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET are set in .env")
    uvicorn.run("api_main:app", host=API_HOST, port=API_PORT)
