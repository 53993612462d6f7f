"""Classification of bulk import input lines."""

import re

from mediafire_client.models.imports import HashTriple, ImportLine, ShareLink

HASH_TRIPLE_PATTERN = re.compile(r"^(.+);(\d+);([0-9a-fA-F]{64})$")


def share_link_pattern(service_host: str = "mediafire.com") -> re.Pattern[str]:
    """Pattern matching ``https://www.<host>/file/<quick key>`` links."""
    return re.compile(
        rf"^https?://(?:www\.)?{re.escape(service_host)}/file/([A-Za-z0-9]+)",
        re.IGNORECASE,
    )


class LineParser:
    """
    Turns a raw input line into a HashTriple or ShareLink.

    Example:
        ```python
        parser = LineParser()
        parser.parse("https://www.mediafire.com/file/abc123/name.zip")
        # ShareLink(quick_key='abc123')
        ```
    """

    def __init__(self, service_host: str = "mediafire.com") -> None:
        self._share_link = share_link_pattern(service_host)

    def parse(self, line: str) -> ImportLine | None:
        """
        Classify one line.

        Args:
            line: Input line, surrounding whitespace is ignored.

        Returns:
            The parsed line, or None if the line is empty or unrecognized.
        """
        line = line.strip()
        if not line:
            return None

        if match := HASH_TRIPLE_PATTERN.match(line):
            filename, size, sha256 = match.groups()
            return HashTriple(filename=filename, size=int(size), sha256=sha256.lower())

        if match := self._share_link.match(line):
            return ShareLink(quick_key=match.group(1))

        return None
