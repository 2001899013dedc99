"""Constants for the sampler API."""

# =============================================================================
# Audio Constants
# =============================================================================

AUDIO_EXTENSION = ".mp3"
AUDIO_MEDIA_TYPE = "audio/mpeg"

# Per-request workspace directory prefix
WORKSPACE_PREFIX = "yt-dlp-"


# =============================================================================
# Audio Service Form Fields
# =============================================================================

FORM_FIELD_FILE = "file"
FORM_FIELD_SPLICE_DURATION = "spliceDuration"
FORM_FIELD_SPLICE_COUNT = "spliceCount"
FORM_FIELD_REVERSE = "reverse"


# =============================================================================
# HTTP Client Constants
# =============================================================================

# Connection pool limits for the audio service client
HTTP_MAX_KEEPALIVE_CONNECTIONS = 10
HTTP_MAX_CONNECTIONS = 20
HTTP_KEEPALIVE_EXPIRY = 30.0

# Health probes should answer quickly regardless of HTTP_TIMEOUT_SECONDS
HEALTH_CHECK_TIMEOUT = 5.0
