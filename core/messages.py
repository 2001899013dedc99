"""Centralized error and log message templates for the sampling pipeline."""


class ErrorMessages:
    """Centralized error message templates."""

    # Client-facing (short, no internal detail)
    INVALID_REQUEST_BODY = "Invalid request body"
    TEMP_DIR_FAILED = "Error creating temp dir"
    DOWNLOAD_FAILED = "Error downloading audio"
    PROCESSING_FAILED = "Error processing audio"
    FILE_TOO_LARGE = "Downloaded audio exceeds maximum file size"
    INTERNAL_ERROR = "Internal server error"

    # Validation
    URL_EMPTY = "URL cannot be empty"
    URL_INVALID = "URL must be a valid http or https URL"
    SPLICE_DURATION_INVALID = "splice duration must be > 0"
    SPLICE_COUNT_INVALID = "splice count must be > 0"

    # Downloader
    DOWNLOADER_NOT_FOUND = (
        "Downloader executable not found: {executable}. "
        "Install yt-dlp or set DOWNLOADER_EXECUTABLE to its path."
    )
    DOWNLOADER_START_FAILED = "Failed to start downloader {executable}: {error}"
    DOWNLOADER_EXIT_CODE = "Downloader exited with code {code}"
    DOWNLOADER_TIMEOUT = "Downloader timed out after {timeout}s"
    DOWNLOADER_NO_OUTPUT = "Downloader produced no output file at {path}"

    # Relay
    RELAY_READ_FAILED = "Failed to read audio file {path}: {error}"
    RELAY_REQUEST_FAILED = "Request to audio service failed: {error}"

    # Workspace
    WORKSPACE_CREATE_FAILED = "Failed to create workspace in {path}: {error}"


class LogMessages:
    """Centralized log message templates."""

    # Initialization
    INIT_HTTP_CLIENT = "Created HTTP client for audio service (timeout={timeout}s)"
    INIT_SERVICE = (
        "SampleService initialized (downloader={downloader}, processor={processor}, "
        "max_concurrent_jobs={jobs})"
    )

    # Download
    DOWNLOAD_START = "Downloading audio from: {url}"
    DOWNLOAD_COMPLETE = "Downloaded {size:.2f}MB to {destination} in {duration:.2f}s"
    DOWNLOAD_FAILED = "Error executing downloader: {error}\nOutput: {output}"
    DOWNLOAD_OUTPUT = "Downloader output: {output}"
    DOWNLOAD_KILLED = "Killed unfinished downloader process (pid={pid})"

    # Relay
    RELAY_START = (
        "Sending {filename} to audio service: spliceDuration={duration}, "
        "spliceCount={count}, reverse={reverse}"
    )
    RELAY_COMPLETE = "Audio service responded HTTP {status_code} ({size} bytes)"
    RELAY_ERROR_STATUS = "Audio service returned HTTP {status_code}, relaying body as-is"
    RELAY_FAILED = "Error with audio service: {error}"

    # Workspace
    WORKSPACE_CREATED = "Created workspace {path}"
    WORKSPACE_REMOVED = "Removed workspace {path}"
    WORKSPACE_CLEANUP_FAILED = "Failed to clean up workspace {path}: {error}"

    # Request lifecycle
    REQUEST_RECEIVED = "Sample request for url={url} (spliceDuration={duration}, spliceCount={count}, reverse={reverse})"
    REQUEST_COMPLETE = "Sample ready: {filename} ({size} bytes) in {duration:.2f}s"
    DECODE_FAILED = "Error decoding request: {error}"
    VALIDATION_FAILED = "Request validation failed: {error}"
