# File: src/mcp_swiss_army_knife/tools/release_fetch.py
from __future__ import annotations

import asyncio
import logging
from typing import List, Tuple
from urllib.parse import unquote, urlsplit

import httpx

from ..errors import NetworkError, ResolutionError
from ..models.params import ReleaseRequest
from ..models.release import AssetFile, ResolvedRelease
from ..settings import Settings
from ..utils.logging import preview

log = logging.getLogger("mcp.swiss.release.fetch")

ASSET_NAMES: Tuple[str, ...] = ("main.js", "manifest.json", "styles.css")

_TAG_MARKER = "/releases/tag"
_TAG_SEGMENT = "/releases/tag/"
_DOWNLOAD_SEGMENT = "/releases/download/"


def build_client(settings: Settings) -> httpx.AsyncClient:
    timeout = httpx.Timeout(settings.http_timeout_seconds)
    return httpx.AsyncClient(follow_redirects=settings.http_follow_redirects, timeout=timeout)


def release_lookup_url(request: ReleaseRequest) -> str:
    base = request.repository_url.rstrip("/")
    if request.is_latest:
        return f"{base}/releases/latest"
    return f"{base}/releases/tag/{request.version_label}"


def download_base_url(release_url: str) -> str:
    return release_url.replace(_TAG_SEGMENT, _DOWNLOAD_SEGMENT, 1)


def parse_release_url(release_url: str) -> Tuple[str, str, str]:
    """
    Split a tag page URL into (owner, repo, tag).

    Expected path shape: /<owner>/<repo>/releases/tag/<tag>
    Tags may themselves contain slashes, so everything after "tag" is the tag.
    Any other shape raises ResolutionError instead of guessing.
    """
    path = urlsplit(release_url).path
    parts = [unquote(p) for p in path.split("/") if p]
    if len(parts) < 5 or parts[2] != "releases" or parts[3] != "tag":
        raise ResolutionError(
            f"Unexpected release url shape {release_url} "
            "(expected <owner>/<repo>/releases/tag/<version>)",
            data={"url": release_url},
        )
    owner, repo = parts[0], parts[1]
    tag = "/".join(parts[4:])
    return owner, repo, tag


async def resolve(request: ReleaseRequest, client: httpx.AsyncClient) -> ResolvedRelease:
    """
    Follow the hosting service's redirect from the lookup URL to a tag page.

    Fails with ResolutionError when the lookup is not successful or the final
    URL is not a tag page (unknown repository or tag).
    """
    lookup = release_lookup_url(request)
    log.info("release.resolve.begin", extra={"url": lookup})
    try:
        resp = await client.get(lookup)
    except httpx.HTTPError as e:
        raise NetworkError(f"Request to {lookup} failed: {e}", data={"url": lookup}) from e

    # a trailing slash would leave an empty segment in every asset URL
    final_url = str(resp.url).rstrip("/")
    log.info("release.resolve.status", extra={"status": resp.status_code, "url": final_url})
    if not resp.is_success:
        raise ResolutionError(f"Invalid url: {lookup}", data={"url": lookup, "status": resp.status_code})
    if _TAG_MARKER not in final_url:
        raise ResolutionError(f"Redirect url is not valid {final_url}", data={"url": final_url})

    owner, repo, tag = parse_release_url(final_url)
    resolved = ResolvedRelease(
        release_url=final_url,
        download_base_url=download_base_url(final_url),
        owner=owner,
        plugin_name=repo,
        tag=tag,
    )
    log.info("release.resolve.ok", extra={"plugin": repo, "tag": tag})
    return resolved


def asset_request_url(url: str, settings: Settings) -> str:
    if settings.use_cors_relay:
        return settings.cors_relay_url + url
    return url


async def _fetch_one(client: httpx.AsyncClient, base_url: str, name: str, settings: Settings) -> AssetFile:
    url = asset_request_url(f"{base_url}/{name}", settings)
    try:
        resp = await client.get(url)
    except httpx.HTTPError as e:
        raise NetworkError(f"Failed to fetch {name}: {e}", data={"url": url}) from e
    text = resp.text
    log.info("assets.fetch.status", extra={"asset": name, "status": resp.status_code, "chars": len(text)})
    log.debug("assets.fetch.body", extra={"asset": name, "body": preview(text)})
    return AssetFile(name=name, content=text)


async def fetch_assets(
    base_url: str,
    client: httpx.AsyncClient,
    settings: Settings,
) -> List[AssetFile]:
    """
    Download every candidate asset concurrently and keep the ones that exist.

    A body containing the not-found marker is the hosting service's missing
    asset page; those files are dropped. A failed request fails the whole call.
    """
    fetched = await asyncio.gather(*(_fetch_one(client, base_url, n, settings) for n in ASSET_NAMES))
    present = [a for a in fetched if settings.not_found_marker not in a.content]
    log.info(
        "assets.fetch.done",
        extra={"present": [a.name for a in present], "missing": len(fetched) - len(present)},
    )
    return present
