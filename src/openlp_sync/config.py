"""Configuration constants for openlp-sync."""

# Well-known OpenLP ports. The HTTP API and the websocket live on the same host.
API_PORT: int = 4316
WS_PORT: int = 4317

API_PATH_PREFIX: str = "/api/v2/"

# Hosts tried in order when none are given on the command line.
DEFAULT_HOSTS: list[str] = ["localhost"]

# Seconds to wait after every candidate host failed, before starting over.
RETRY_DELAY: float = 5.0

# Seconds before a snapshot request is abandoned.
FETCH_TIMEOUT: float = 10.0

# Max number of slides walked backward when a slide inherits chapter/verse.
MAX_CONTINUATION_DEPTH: int = 64
