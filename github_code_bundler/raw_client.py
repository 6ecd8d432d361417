"""Plain-text client for raw.githubusercontent.com and gist raw URLs, using httpx."""

from urllib.parse import quote

import httpx

from .models import GIST_RAW_HOST, RAW_HOST

DEFAULT_TIMEOUT = 30.0

# The credential is only ever sent to these hosts, over https
CREDENTIAL_HOSTS = (RAW_HOST, GIST_RAW_HOST)


def raw_file_url(owner: str, repo: str, ref: str, path: str) -> str:
    return f"https://{RAW_HOST}/{owner}/{repo}/{quote(ref, safe='/')}/{quote(path, safe='/')}"


class RawContentClient:
    """Thin httpx client returning response bodies verbatim as text."""

    def __init__(
        self,
        credential: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self._credential = credential
        self._client = httpx.Client(
            headers={"Accept": "text/plain, */*"},
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    def get_text(self, url: str) -> str:
        """GET a URL and return its body.

        Non-2xx raises httpx.HTTPStatusError; connection problems raise the
        underlying httpx.HTTPError.
        """
        resp = self._client.get(url, headers=self._auth_headers(url))
        if not 200 <= resp.status_code < 300:
            raise httpx.HTTPStatusError(
                f"Raw fetch error {resp.status_code} {resp.reason_phrase}",
                request=resp.request,
                response=resp,
            )
        return resp.text

    def _auth_headers(self, url: str) -> dict[str, str]:
        if not self._credential:
            return {}
        parsed = httpx.URL(url)
        if parsed.scheme != "https" or parsed.host not in CREDENTIAL_HOSTS:
            return {}
        return {"Authorization": f"Bearer {self._credential}"}

    def close(self):
        self._client.close()
