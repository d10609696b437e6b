"""
Shared endpoints for REST client integration tests.

httpbin echoes requests back, so JSON bodies, headers and status codes can be
asserted against a real server. Requires network.
"""

HTTPBIN_BASE_ADDRESS = "https://httpbin.org"

# ---- Echo endpoints (2xx, JSON body describing the request) ----
ECHO_GET = "/get"
ECHO_POST = "/post"
ECHO_PUT = "/put"

# ---- Non-JSON payloads ----
XML_DOCUMENT = "/xml"
RAW_BYTES_16 = "/bytes/16"

# ---- Expected to return non-2xx (for error-path assertions) ----
ERROR_STATUS_URIS = [
    ("/status/404", 404),
    ("/status/500", 500),
]
