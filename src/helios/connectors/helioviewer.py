# SPDX-License-Identifier: Apache-2.0
"""Client for the Helioviewer movie API."""

from __future__ import annotations

import asyncio
import logging

from pydantic import ValidationError

from helios.connectors.backends import api as api_backend
from helios.movie.models import MovieMetadata
from helios.utils.env import env, env_float, env_int

LOGGER = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.helioviewer.org/v2"


class FetchError(RuntimeError):
    """Raised when movie metadata cannot be retrieved or understood."""


class HelioviewerClient:
    """Fetch movie metadata from Helioviewer.

    Defaults come from ``HELIOS_HELIOVIEWER_API``, ``HELIOS_HTTP_TIMEOUT`` and
    ``HELIOS_HTTP_RETRIES``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        max_retries: int | None = None,
    ) -> None:
        base = base_url or env("HELIOVIEWER_API", DEFAULT_API_URL) or DEFAULT_API_URL
        self.base_url = base.rstrip("/")
        self.timeout = timeout if timeout is not None else env_float("HTTP_TIMEOUT", 60)
        self.max_retries = (
            max_retries if max_retries is not None else env_int("HTTP_RETRIES", 3)
        )

    def movie_status_url(self) -> str:
        return f"{self.base_url}/getMovieStatus/"

    def get_movie_details(self, movie_id: str) -> MovieMetadata:
        """Return the metadata of movie ``movie_id``; raises ``FetchError``."""

        url = self.movie_status_url()
        LOGGER.debug("Fetching movie %s from %s", movie_id, url)
        try:
            status, _headers, content = api_backend.request_with_retries(
                "GET",
                url,
                params={"id": str(movie_id), "format": "json"},
                timeout=self.timeout,
                max_retries=self.max_retries,
            )
        except RuntimeError as exc:
            raise FetchError(str(exc)) from exc
        except Exception as exc:  # requests' transport errors
            raise FetchError(f"Request for movie {movie_id} failed: {exc}") from exc
        if status >= 400:
            raise FetchError(
                f"Helioviewer returned HTTP {status} for movie {movie_id}"
            )
        payload = api_backend.json_loads(content)
        if not isinstance(payload, dict):
            raise FetchError(
                f"Helioviewer returned a non-JSON body for movie {movie_id}"
            )
        if payload.get("error"):
            raise FetchError(
                f"Helioviewer error for movie {movie_id}: {payload['error']}"
            )
        try:
            return MovieMetadata.model_validate(payload)
        except ValidationError as exc:
            raise FetchError(
                f"Incomplete metadata for movie {movie_id}: {exc}"
            ) from exc

    async def aget_movie_details(self, movie_id: str) -> MovieMetadata:
        """Async variant; the blocking request runs in a worker thread."""

        return await asyncio.to_thread(self.get_movie_details, movie_id)
