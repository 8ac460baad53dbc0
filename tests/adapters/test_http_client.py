import httpx
import pytest

from adapters.http_client import HttpDownloader, build_client
from core.errors import DownloadError

URL = "https://example.test/LICENSE"


def test_build_client_sets_user_agent_and_timeout(settings):
    with build_client(settings, extra_headers={"Accept": "text/plain"}) as client:
        assert client.headers["User-Agent"] == settings.user_agent
        assert client.headers["Accept"] == "text/plain"
        assert client.timeout.read == settings.http_timeout_seconds


def test_fetch_returns_exact_bytes(settings):
    body = b"line one\r\nline two\n\xe2\x9c\x93"
    downloader = HttpDownloader(settings, transport=httpx.MockTransport(lambda r: httpx.Response(200, content=body)))

    assert downloader.fetch(URL) == body


def test_non_success_status_raises(settings):
    downloader = HttpDownloader(settings, transport=httpx.MockTransport(lambda r: httpx.Response(404)))

    with pytest.raises(DownloadError, match="HTTP 404"):
        downloader.fetch(URL)


def test_timeout_raises(settings):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    downloader = HttpDownloader(settings, transport=httpx.MockTransport(handler))

    with pytest.raises(DownloadError, match="timed out"):
        downloader.fetch(URL)


def test_redirect_is_followed(settings):
    def handler(request):
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": URL})
        return httpx.Response(200, content=b"ok")

    downloader = HttpDownloader(settings, transport=httpx.MockTransport(handler))

    assert downloader.fetch("https://example.test/old") == b"ok"
