"""
Freaky Fit API - Pexels Video Service.

Looks up exercise demonstration videos on the Pexels Videos API.

API Docs: https://www.pexels.com/api/documentation/#videos-search
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from settings import settings
from app.services.cache import cache_service, CacheService

logger = logging.getLogger(__name__)


class VideoSearchError(Exception):
    """Raised when the video search cannot be performed."""


class PexelsService:
    """
    Pexels Videos API client.

    Lookups are not retried; HTTP and transport errors propagate to the
    caller. Found links are cached in Redis by exercise name.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
        cache: Optional[CacheService] = None,
    ):
        self.api_key = api_key or settings.PEXELS_API_KEY
        self.base_url = (base_url or settings.PEXELS_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.PEXELS_TIMEOUT_SECONDS
        self._client = client
        self.cache = cache or cache_service

    @staticmethod
    def search_page_url(exercise_name: str) -> str:
        """Public Pexels search page, used when the API has no hits."""
        return f"https://www.pexels.com/search/videos/{quote(exercise_name)}/"

    @staticmethod
    def _pick_video_link(videos: List[Dict[str, Any]]) -> Optional[str]:
        """Prefer an HD mp4 file of the first hit, then any file, then the page URL."""
        if not videos:
            return None
        video = videos[0]
        files = video.get("video_files") or []
        mp4_files = [f for f in files if f.get("file_type") == "video/mp4" and f.get("link")]
        for f in mp4_files:
            if f.get("quality") == "hd":
                return f["link"]
        if mp4_files:
            return mp4_files[0]["link"]
        for f in files:
            if f.get("link"):
                return f["link"]
        return video.get("url")

    async def _search(self, client: httpx.AsyncClient, exercise_name: str) -> Dict[str, Any]:
        response = await client.get(
            f"{self.base_url}/videos/search",
            params={
                "query": f"{exercise_name} exercise",
                "per_page": 1,
                "orientation": "landscape",
            },
            headers={"Authorization": self.api_key},
        )
        response.raise_for_status()
        return response.json()

    async def get_exercise_video(self, exercise_name: str) -> str:
        """
        Find a demonstration video URL for an exercise.

        Args:
            exercise_name: Exercise name as produced by the AI plan.

        Returns:
            str: Direct video link, or the Pexels search page when nothing matched.

        Raises:
            VideoSearchError: Pexels API key not configured.
            httpx.HTTPError: Request failed or returned an error status.
        """
        if not self.api_key:
            raise VideoSearchError("Pexels API key not configured")

        cache_key = f"exercise_video:{exercise_name.strip().lower()}"
        cached = await self.cache.get(cache_key)
        if cached:
            return cached

        if self._client is not None:
            data = await self._search(self._client, exercise_name)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                data = await self._search(client, exercise_name)

        link = self._pick_video_link(data.get("videos") or [])
        if not link:
            logger.info(f"No Pexels video found for '{exercise_name}'")
            return self.search_page_url(exercise_name)

        await self.cache.set(cache_key, link, ttl_seconds=settings.CACHE_TTL_EXERCISE_VIDEO)
        return link


pexels_service = PexelsService()
