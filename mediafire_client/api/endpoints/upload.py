"""Upload API endpoints."""

from mediafire_client.api.http_client import AsyncHttpClient

INSTANT_PATH = "upload/instant"


async def instant(
    http: AsyncHttpClient,
    *,
    filename: str,
    size: int,
    sha256: str,
    folder_key: str | None = None,
) -> str | None:
    """
    Claim a file already stored on the server by its SHA-256 hash.

    Args:
        http: Configured async HTTP client.
        filename: Name to give the file in the account.
        size: File size in bytes.
        sha256: SHA-256 hex digest of the content.
        folder_key: Destination folder, account root if omitted.

    Returns:
        Quick key of the newly added file, or None when the account
        already holds it.

    Raises:
        HashNotFoundError: If no file with this hash is hosted.
    """
    params = {"filename": filename, "size": size, "hash": sha256.lower()}
    if folder_key:
        params["folder_key"] = folder_key
    response = await http.request(INSTANT_PATH, params)
    return response.get("quickkey") or None
