"""Services for the DevConnect API."""

from devconnect.services.accounts import AuthService, gravatar_url
from devconnect.services.github import GitHubClient, get_github_client
from devconnect.services.posts import PostService
from devconnect.services.profiles import ProfileService

__all__ = [
    "AuthService",
    "ProfileService",
    "PostService",
    "GitHubClient",
    "get_github_client",
    "gravatar_url",
]
