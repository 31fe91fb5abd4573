"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=3000, default_headers=(("X-Powered-By", "hermes"),))
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False  # forces uvicorn log_level="debug"

    # Logging (forwarded to the ASGI server)
    log_level: str = "info"
    access_log: bool = True

    # Headers added by the response decorator unless a handler set them first
    default_headers: tuple[tuple[str, str], ...] = ()

    # Response.json() serialization
    json_ensure_ascii: bool = False
    json_indent: int | None = None
