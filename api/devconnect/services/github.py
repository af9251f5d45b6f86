"""GitHub repository lookup."""

from urllib.parse import quote

import httpx

from devconnect.config import settings
from devconnect.errors import UpstreamLookupFailed
from devconnect.logging import get_logger
from devconnect.schemas.profile import RepoSummary

logger = get_logger(__name__)

MAX_REPOS = 5


class GitHubClient:
    """
    Thin client for the GitHub REST API.

    Any failure (network error, 4xx, 5xx, unexpected payload) is reported as
    ``UpstreamLookupFailed``; there is no retry.
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str = "https://api.github.com",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": "devconnect-api",
            "Accept": "application/vnd.github+json",
        }
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    async def list_repos(self, username: str) -> list[RepoSummary]:
        """Return up to five of a user's repositories, oldest first."""
        if not username or not username.strip():
            raise UpstreamLookupFailed()

        url = f"{self.base_url}/users/{quote(username.strip(), safe='')}/repos"
        params = {"per_page": MAX_REPOS, "sort": "created", "direction": "asc"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params=params, headers=self._headers())
                response.raise_for_status()
                payload = response.json()
            if not isinstance(payload, list):
                raise ValueError("Expected a list of repositories")
            repos = [RepoSummary.model_validate(repo) for repo in payload[:MAX_REPOS]]
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("github_lookup_failed", username=username, error=str(exc))
            raise UpstreamLookupFailed() from exc

        return repos


def get_github_client() -> GitHubClient:
    """Dependency that provides a GitHub client built from settings."""
    return GitHubClient(
        token=settings.github_token,
        base_url=settings.github_api_url,
        timeout=settings.github_timeout_seconds,
    )
