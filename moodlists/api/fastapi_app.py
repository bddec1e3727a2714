from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moodlists.api.health import router as health_router
from moodlists.api.music.routes import router as music_router
from moodlists.api.recommendations.routes import router as recommendations_router
from moodlists.api.users.routes import router as users_router
from moodlists.core import configure_logging

configure_logging()

app = FastAPI(
    title="Moodlists API",
    version="0.1.0",
    description="Emotion-based Spotify playlists with per-user length preferences.",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Health & Spotify connection check
app.include_router(health_router, tags=["health"])

# Playlist generation
app.include_router(
    recommendations_router, prefix="/api/recommendations", tags=["recommendations"]
)

# Raw catalog search
app.include_router(music_router, prefix="/api/music", tags=["music"])

# User profiles & preferences
app.include_router(users_router, prefix="/api/users", tags=["users"])
