# ---------------------------------------------------------------------
# Release coordinates
# ---------------------------------------------------------------------

RELEASE_HOST = "github.com"
RELEASE_REPO = "Try-Wind/Wake"
RELEASE_VERSION = "v0.1.5"

EXECUTABLE_NAME = "wake"

# ---------------------------------------------------------------------
# Download policy
# ---------------------------------------------------------------------

# Anything smaller is treated as a corrupt or truncated artifact.
MIN_ARTIFACT_SIZE = 1_000_000

MAX_REDIRECTS = 10
REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})

DOWNLOAD_TIMEOUT = 60  # seconds, per socket read
DOWNLOAD_CHUNK_SIZE = 64 * 1024

EXECUTABLE_MODE = 0o755

# ---------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------

ENV_RELEASE_HOST = "WAKE_RELEASE_HOST"
ENV_RELEASE_REPO = "WAKE_RELEASE_REPO"
ENV_RELEASE_VERSION = "WAKE_RELEASE_VERSION"
ENV_HOME = "WAKE_HOME"
ENV_INSTALL_DIR = "WAKE_INSTALL_DIR"
ENV_LOG_LEVEL = "WAKE_LOG_LEVEL"

LOG_FILE_NAME = "installer.log.json"
