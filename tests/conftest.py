"""
Shared test fixtures: settings pointed at a temp vault, a recording vault,
and a fake release host served through httpx.MockTransport.
"""

from pathlib import Path
from typing import Callable, Dict, List, Optional

import httpx
import pytest

from mcp_swiss_army_knife.host.vault import LocalVault
from mcp_swiss_army_knife.settings import Settings

REPO_URL = "https://github.com/owner/sample-plugin"
RELEASE_TAG = "1.0.0"
TAG_URL = f"{REPO_URL}/releases/tag/{RELEASE_TAG}"

DEFAULT_ASSETS = {
    "main.js": "module.exports = {};",
    "manifest.json": '{"id": "sample-plugin", "version": "1.0.0"}',
    "styles.css": ".sample { color: red; }",
}


class RecordingVault:
    """In-memory vault that remembers the order of filesystem calls."""

    def __init__(self) -> None:
        self.ops: List[tuple] = []
        self.files: Dict[str, str] = {}
        self.folders: set = set()

    def exists(self, path: str) -> bool:
        return path in self.files or path in self.folders

    def create_folder(self, path: str) -> None:
        self.ops.append(("mkdir", path))
        self.folders.add(path)

    def write_file(self, path: str, content: str) -> None:
        self.ops.append(("write", path))
        self.files[path] = content

    def read_file(self, path: str) -> str:
        return self.files[path]


class FakeReleaseHost:
    """Answers like the hosting service: latest redirects to a tag page,
    missing assets come back as a "Not Found" page."""

    def __init__(self, assets: Optional[Dict[str, str]] = None, latest_target: str = TAG_URL):
        self.assets = DEFAULT_ASSETS if assets is None else assets
        self.latest_target = latest_target
        self.calls: List[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(str(request.url))
        path = request.url.path
        if path.endswith("/owner/sample-plugin/releases/latest"):
            return httpx.Response(302, headers={"location": self.latest_target})
        if "/owner/sample-plugin/releases/tag/" in path:
            return httpx.Response(200, text="<html>release page</html>")
        if "/owner/sample-plugin/releases/download/" in path:
            name = path.rsplit("/", 1)[-1]
            if name in self.assets:
                return httpx.Response(200, text=self.assets[name])
            return httpx.Response(404, text="Not Found")
        if path.endswith("/owner/sample-plugin/releases"):
            return httpx.Response(200, text="<html>all releases</html>")
        return httpx.Response(404, text="Not Found")

    def download_calls(self) -> List[str]:
        return [c for c in self.calls if "/releases/download/" in c]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(vault_path=str(tmp_path))


@pytest.fixture
def vault(tmp_path: Path) -> LocalVault:
    return LocalVault(str(tmp_path))


@pytest.fixture
def recording_vault() -> RecordingVault:
    return RecordingVault()


@pytest.fixture
def release_host() -> FakeReleaseHost:
    return FakeReleaseHost()


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)
    return _make
