#!/usr/bin/env python3
"""
Smoke test for a running moodlists backend.

It runs through:
- health + Spotify connection check (/health, /api/test)
- emotions listing and playlist generation for every emotion
- catalog search (/api/music/search/*)
- user profile create / merge / update preferences, then a
  user-driven playlist that must honour the stored length

Needs real SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET on the server side.

Run with:
    python api_main.py            # in one terminal
    python scripts/smoke_test.py  # in another
"""

import json
import os
import sys
import uuid
from typing import Any, Dict

import requests

BASE_URL = os.getenv("MOODLISTS_BASE_URL", "http://localhost:3000")


def call(method: str, path: str, expected_status: int = 200, **kwargs) -> Dict[str, Any]:
    """Call the API, print a concise preview and exit on unexpected status."""
    url = f"{BASE_URL}{path}"
    print(f"\n=== {method.upper()} {path} ===")
    try:
        resp = requests.request(method, url, timeout=30, **kwargs)
    except requests.RequestException as e:
        print(f"❌ Request failed: {e}")
        sys.exit(1)

    print(f"Status: {resp.status_code}")
    if resp.status_code != expected_status:
        print(f"❌ Expected {expected_status}:")
        print(resp.text)
        sys.exit(1)

    try:
        data = resp.json()
    except ValueError:
        print("❌ Non-JSON response:")
        print(resp.text)
        sys.exit(1)

    snippet = json.dumps(data, indent=2)[:500]
    print(snippet)
    if len(snippet) == 500:
        print("…(truncated)…")

    return data


def fail(message: str) -> None:
    print(f"❌ {message}")
    sys.exit(1)


def check_playlists() -> None:
    emotions = call("get", "/api/recommendations/emotions")["emotions"]
    if not emotions:
        fail("No emotions listed.")

    for info in emotions:
        playlist = call(
            "post", "/api/recommendations/emotion", json={"emotion": info["emotion"]}
        )
        if playlist["artist"] != info["artist"]:
            fail(f"Playlist artist {playlist['artist']!r} != {info['artist']!r}")
        if playlist["total_tracks"] != len(playlist["tracks"]):
            fail("total_tracks does not match the number of tracks.")

    detail = call(
        "post",
        "/api/recommendations/emotion",
        expected_status=400,
        json={"emotion": "not-an-emotion"},
    )["detail"]
    if detail.get("error") != "UnknownEmotionError":
        fail("Unknown emotion was not reported as UnknownEmotionError.")


def check_search() -> None:
    tracks = call("get", "/api/music/search/tracks", params={"q": "Rocket Man", "limit": 3})
    if len(tracks["tracks"]) > 3:
        fail("Track search ignored the limit.")
    call("get", "/api/music/search/artists", params={"q": "TheFatRat", "limit": 1})


def check_users() -> None:
    user_id = f"smoke-{uuid.uuid4().hex[:8]}"

    call("get", f"/api/users/{user_id}", expected_status=404)
    call("post", "/api/users", json={"id": user_id, "playlist_length": 4})
    merged = call("post", "/api/users", json={"id": user_id, "favorite_genre": "rock"})
    if merged["user"].get("playlist_length") != 4:
        fail("Saving a partial profile dropped playlist_length.")

    call("put", f"/api/users/{user_id}/preferences", json={"playlist_length": 2})
    playlist = call(
        "post",
        "/api/recommendations/emotion",
        json={"emotion": "happy", "user_id": user_id},
    )
    if playlist["total_tracks"] > 2:
        fail("Playlist ignored the stored playlist_length.")

    call(
        "put",
        f"/api/users/{user_id}-missing/preferences",
        expected_status=404,
        json={"playlist_length": 2},
    )


def main() -> None:
    call("get", "/health")
    call("get", "/api/test")
    check_playlists()
    check_search()
    check_users()
    print("\n🎉 Smoke test completed successfully.\n")


if __name__ == "__main__":
    main()
