"""
Tests for release resolution and asset download against a fake release host.
"""

import asyncio

import httpx
import pytest

from mcp_swiss_army_knife.errors import NetworkError, ResolutionError
from mcp_swiss_army_knife.models.params import ReleaseRequest
from mcp_swiss_army_knife.settings import Settings
from mcp_swiss_army_knife.tools.release_fetch import (
    ASSET_NAMES,
    asset_request_url,
    download_base_url,
    fetch_assets,
    parse_release_url,
    release_lookup_url,
    resolve,
)

from conftest import REPO_URL, TAG_URL, FakeReleaseHost

DOWNLOAD_BASE = f"{REPO_URL}/releases/download/1.0.0"


def _resolve(client, url=REPO_URL, version="latest"):
    async def go():
        async with client:
            return await resolve(ReleaseRequest(repository_url=url, version_label=version), client)
    return asyncio.run(go())


def _fetch(client, settings):
    async def go():
        async with client:
            return await fetch_assets(DOWNLOAD_BASE, client, settings)
    return asyncio.run(go())


class TestLookupUrl:
    def test_explicit_tag(self):
        request = ReleaseRequest(repository_url=REPO_URL, version_label="v1.2.0")
        assert release_lookup_url(request) == f"{REPO_URL}/releases/tag/v1.2.0"

    def test_latest(self):
        assert release_lookup_url(ReleaseRequest(repository_url=REPO_URL)) == f"{REPO_URL}/releases/latest"

    def test_blank_version_means_latest(self):
        request = ReleaseRequest(repository_url=REPO_URL + "/", version_label=" ")
        assert request.is_latest
        assert release_lookup_url(request) == f"{REPO_URL}/releases/latest"


class TestParseReleaseUrl:
    def test_named_parts(self):
        assert parse_release_url(TAG_URL) == ("owner", "sample-plugin", "1.0.0")

    def test_tag_with_slash(self):
        url = f"{REPO_URL}/releases/tag/release/2.0"
        assert parse_release_url(url) == ("owner", "sample-plugin", "release/2.0")

    @pytest.mark.parametrize(
        "url",
        [
            "https://github.com/releases/tag/1.0.0",
            "https://example.com/group/owner/repo/releases/tag/1.0.0",
            "https://github.com/owner/repo/releases/tag/",
        ],
    )
    def test_unexpected_shape_fails_loudly(self, url):
        with pytest.raises(ResolutionError):
            parse_release_url(url)

    def test_download_base(self):
        assert download_base_url(TAG_URL) == DOWNLOAD_BASE


class TestResolve:
    def test_latest_follows_redirect_to_tag(self, release_host, make_client):
        release = _resolve(make_client(release_host))

        assert release_host.calls[0] == f"{REPO_URL}/releases/latest"
        assert release.release_url == TAG_URL
        assert release.download_base_url == DOWNLOAD_BASE
        assert release.plugin_name == "sample-plugin"
        assert release.owner == "owner"
        assert release.tag == "1.0.0"

    def test_explicit_version_requests_tag_page(self, release_host, make_client):
        release = _resolve(make_client(release_host), version="v1.2.0")

        assert release_host.calls == [f"{REPO_URL}/releases/tag/v1.2.0"]
        assert release.tag == "v1.2.0"

    def test_non_success_status(self, make_client):
        client = make_client(lambda request: httpx.Response(404, text="Not Found"))
        with pytest.raises(ResolutionError, match="Invalid url"):
            _resolve(client)

    def test_redirect_without_tag_marker(self, make_client):
        host = FakeReleaseHost(latest_target=f"{REPO_URL}/releases")
        with pytest.raises(ResolutionError, match="Redirect url is not valid"):
            _resolve(make_client(host))
        assert host.download_calls() == []

    def test_connection_failure_is_network_error(self, make_client):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(NetworkError):
            _resolve(make_client(refuse))


class TestFetchAssets:
    def test_all_present(self, release_host, make_client, settings):
        assets = _fetch(make_client(release_host), settings)
        assert [a.name for a in assets] == list(ASSET_NAMES)
        assert len(release_host.download_calls()) == 3

    def test_not_found_page_is_dropped(self, make_client, settings):
        host = FakeReleaseHost(assets={"main.js": "code", "manifest.json": "{}"})
        assets = _fetch(make_client(host), settings)
        assert {a.name: a.content for a in assets} == {"main.js": "code", "manifest.json": "{}"}

    def test_cors_relay_prefix(self, release_host, make_client, settings):
        settings.use_cors_relay = True
        assets = _fetch(make_client(release_host), settings)

        assert len(assets) == 3
        hosts = {httpx.URL(c).host for c in release_host.download_calls()}
        assert hosts == {"cors-anywhere.herokuapp.com"}

    def test_relay_url_building(self):
        s = Settings(use_cors_relay=True)
        assert asset_request_url("https://x/y", s) == "https://cors-anywhere.herokuapp.com/https://x/y"
        assert asset_request_url("https://x/y", Settings()) == "https://x/y"

    def test_one_failed_request_fails_everything(self, release_host, make_client, settings):
        def flaky(request):
            if request.url.path.endswith("styles.css"):
                raise httpx.ReadError("reset", request=request)
            return release_host(request)

        with pytest.raises(NetworkError, match="styles.css"):
            _fetch(make_client(flaky), settings)

    def test_requests_run_concurrently(self, release_host, settings):
        arrived = []

        async def go():
            all_in = asyncio.Event()

            async def gated(request):
                arrived.append(request.url.path)
                if len(arrived) == len(ASSET_NAMES):
                    all_in.set()
                # a sequential fetch would never let the other two requests in
                await asyncio.wait_for(all_in.wait(), timeout=2)
                return release_host(request)

            transport = httpx.MockTransport(gated)
            async with httpx.AsyncClient(transport=transport) as client:
                return await fetch_assets(DOWNLOAD_BASE, client, settings)

        assets = asyncio.run(go())
        assert len(arrived) == 3
        assert [a.name for a in assets] == list(ASSET_NAMES)


def test_trailing_slash_on_tag_page_is_dropped(make_client):
    host = FakeReleaseHost(latest_target=TAG_URL + "/")
    release = _resolve(make_client(host))

    assert release.release_url == TAG_URL
    assert release.download_base_url == DOWNLOAD_BASE
    assert release.tag == "1.0.0"
