"""
Release configuration shared by the resolver consumers and the installer.

Everything that pins a run to a particular release (host, repository, tag)
lives here instead of in module-level globals, so a test or a mirror can
point the installer at a different endpoint.
"""
import os
from dataclasses import dataclass, field, replace

from wake_installer.internal import constants


@dataclass(frozen=True)
class ReleaseConfig:
    host: str = constants.RELEASE_HOST
    repo: str = constants.RELEASE_REPO
    version: str = constants.RELEASE_VERSION
    executable_name: str = constants.EXECUTABLE_NAME
    min_artifact_size: int = constants.MIN_ARTIFACT_SIZE
    max_redirects: int = constants.MAX_REDIRECTS
    timeout: float = constants.DOWNLOAD_TIMEOUT
    chunk_size: int = constants.DOWNLOAD_CHUNK_SIZE
    scheme: str = field(default="https")

    @classmethod
    def from_env(cls, environ=None) -> "ReleaseConfig":
        """
        Build a config from the built-in release constants, letting
        WAKE_RELEASE_HOST / WAKE_RELEASE_REPO / WAKE_RELEASE_VERSION win.
        Empty values are ignored.
        """
        environ = os.environ if environ is None else environ
        overrides = {}
        for env_name, attr in (
            (constants.ENV_RELEASE_HOST, "host"),
            (constants.ENV_RELEASE_REPO, "repo"),
            (constants.ENV_RELEASE_VERSION, "version"),
        ):
            value = environ.get(env_name, "").strip()
            if value:
                overrides[attr] = value
        return cls(**overrides)

    def with_overrides(self, **changes) -> "ReleaseConfig":
        return replace(self, **changes)

    # -----------------------------------------------------------------
    # URLs
    # -----------------------------------------------------------------

    @property
    def repo_url(self) -> str:
        return f"{self.scheme}://{self.host}/{self.repo}"

    @property
    def source_clone_url(self) -> str:
        return f"{self.repo_url}.git"

    @property
    def releases_url(self) -> str:
        return f"{self.repo_url}/releases"

    @property
    def release_page_url(self) -> str:
        return f"{self.releases_url}/tag/{self.version}"

    def download_url(self, artifact_id: str) -> str:
        return f"{self.releases_url}/download/{self.version}/{artifact_id}"
