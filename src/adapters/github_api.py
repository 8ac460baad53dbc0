"""GitHub implementation of `RemoteHost`.

Uses the official REST endpoint `POST /user/repos`. One request per call:
creating a repository is not idempotent, so there are no retries here.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import SecretStr, ValidationError

from adapters.http_client import build_client
from core.config import CREDENTIAL_ENV_VAR, AppSettings
from core.domain.models import RemoteRepository, Visibility
from core.errors import AuthFailedError, NameConflictError, NetworkError

logger = logging.getLogger(__name__)

_AUTH_HINT = (
    f"Check that {CREDENTIAL_ENV_VAR} is valid, not expired, and has the 'repo' scope "
    "(https://github.com/settings/tokens)."
)


def _error_messages(resp: httpx.Response) -> list[str]:
    try:
        data = resp.json()
    except ValueError:
        return [resp.text.strip()] if resp.text.strip() else []
    if not isinstance(data, dict):
        return []

    out: list[str] = []
    if isinstance(data.get("message"), str):
        out.append(data["message"])
    for err in data.get("errors") or []:
        if isinstance(err, dict) and isinstance(err.get("message"), str):
            out.append(err["message"])
        elif isinstance(err, str):
            out.append(err)
    return out


class GitHubClient:
    """Creates repositories for the authenticated user."""

    def __init__(
        self,
        token: SecretStr,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._token = token
        self._settings = settings or AppSettings()
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self._token.get_secret_value()}",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    def create_repository(self, name: str, visibility: Visibility) -> RemoteRepository:
        url = f"{self._settings.github_api_url.rstrip('/')}/user/repos"
        payload: dict[str, Any] = {"name": name, "private": visibility.is_private}
        logger.debug("POST %s name=%s private=%s", url, name, visibility.is_private)

        try:
            with build_client(self._settings, extra_headers=self._headers(), transport=self._transport) as client:
                resp = client.post(url, json=payload)
        except httpx.TimeoutException as exc:
            raise NetworkError(f"GitHub API timed out: {exc}", hint="Re-run with --resume.") from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"Could not reach GitHub API: {exc}", hint="Re-run with --resume.") from exc

        if resp.status_code in (200, 201):
            try:
                return RemoteRepository.model_validate(resp.json())
            except (ValueError, ValidationError) as exc:
                raise NetworkError(f"Unexpected GitHub API response: {exc}") from exc

        messages = _error_messages(resp)
        summary = "; ".join(messages) or resp.reason_phrase

        if resp.status_code in (401, 403):
            raise AuthFailedError(f"GitHub rejected the token ({resp.status_code}): {summary}", hint=_AUTH_HINT)
        if resp.status_code == 422 and any("already exists" in m.lower() for m in messages):
            raise NameConflictError(
                f"Repository '{name}' already exists on this account.",
                hint="Choose another name with --github-repo-name.",
            )
        if resp.status_code == 422:
            raise NetworkError(
                f"GitHub API error ({resp.status_code}): {summary}",
                hint=f"GitHub rejected the repository name '{name}'; choose another with --github-repo-name.",
            )
        raise NetworkError(f"GitHub API error ({resp.status_code}): {summary}")
