"""
MediaFire client configuration.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class MediaFireConfig:
    """
    Attributes:
        app_id: MediaFire application id.
        app_key: Application secret key, used in the login signature.
        api_version: API version inserted into every request path.
        token_version: Session token scheme (1 = static renewable token,
            2 = pool of signed single-use tokens).
        tokens_stored: Requested size of the v2 token pool (clamped to 1-6).
        api_url: Base URL of the MediaFire site.
        service_host: Host name stripped from URLs before signing.
        timeout: Request timeout in seconds.
        renew_interval: Seconds between v1 session token renewals.
        user_agent: User-Agent header value.
        action_token_lifespan: Lifespan of upload action tokens in minutes.
    """

    app_id: int | str
    app_key: str = ""
    api_version: str = "1.3"
    token_version: int = 2
    tokens_stored: int = 3
    api_url: str = "https://www.mediafire.com"
    service_host: str = "mediafire.com"
    timeout: float = 30.0
    renew_interval: float = 6 * 60.0
    user_agent: str = "MediaFire-Python/1.0"
    action_token_lifespan: int = 1440

    def __post_init__(self) -> None:
        if self.app_id in (None, ""):
            msg = "app_id is required"
            raise ValueError(msg)
        if self.token_version not in (1, 2):
            msg = "token_version must be 1 or 2"
            raise ValueError(msg)
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        if self.renew_interval <= 0:
            msg = "renew_interval must be positive"
            raise ValueError(msg)
        if self.action_token_lifespan <= 0:
            msg = "action_token_lifespan must be positive"
            raise ValueError(msg)

    @property
    def api_root(self) -> str:
        """Base path of all API calls, including the version segment."""
        version = f"{self.api_version}/" if self.api_version else ""
        return f"{self.api_url.rstrip('/')}/api/{version}"

    def api_path(self, path: str, api_version: str | None = None) -> str:
        """Absolute URL of an API path such as ``file/get_info``."""
        if api_version is None:
            root = self.api_root
        else:
            version = f"{api_version}/" if api_version else ""
            root = f"{self.api_url.rstrip('/')}/api/{version}"
        return f"{root}{path.strip('/')}.php"

    def file_link(self, quick_key: str) -> str:
        """User-facing link of a stored file."""
        return f"{self.api_url.rstrip('/')}/file/{quick_key}/"
