"""File metadata API endpoints."""

from typing import Any

from mediafire_client.api.http_client import AsyncHttpClient
from mediafire_client.exceptions import InvalidResponseError
from mediafire_client.models.imports import FileInfo

GET_INFO_PATH = "file/get_info"
UPDATE_PATH = "file/update"


async def get_info(http: AsyncHttpClient, quick_key: str) -> FileInfo:
    """
    Get name, size and hash of a stored file.

    Args:
        http: Configured async HTTP client.
        quick_key: Public identifier of the file.

    Returns:
        FileInfo for the file.
    """
    response = await http.request(GET_INFO_PATH, {"quick_key": quick_key})
    info = response.get("file_info")
    if not isinstance(info, dict):
        msg = "Response is missing 'file_info'"
        raise InvalidResponseError(msg, endpoint=GET_INFO_PATH)

    try:
        return FileInfo(
            quick_key=info.get("quickkey", quick_key),
            filename=info["filename"],
            size=int(info["size"]),
            sha256=info["hash"],
        )
    except (KeyError, TypeError, ValueError) as e:
        msg = "Incomplete file_info in response"
        raise InvalidResponseError(msg, endpoint=GET_INFO_PATH) from e


async def update(http: AsyncHttpClient, quick_key: str, **changes: Any) -> dict[str, Any]:
    """Update file properties, e.g. ``update(http, qk, privacy="private")``."""
    return await http.request(UPDATE_PATH, {"quick_key": quick_key, **changes})


async def set_privacy(http: AsyncHttpClient, quick_key: str, privacy: str = "private") -> None:
    """Mark a file public or private."""
    await update(http, quick_key, privacy=privacy)
