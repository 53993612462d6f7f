"""
Bulk import service.

Adds files to the account without transferring content, one input line at
a time, through MediaFire's instant (claim-by-hash) upload.
"""

from collections.abc import AsyncGenerator, Iterable

import structlog

from mediafire_client.api.endpoints.file import get_info, set_privacy
from mediafire_client.api.endpoints.upload import instant
from mediafire_client.api.http_client import AsyncHttpClient
from mediafire_client.config import MediaFireConfig
from mediafire_client.exceptions import HashNotFoundError, MediaFireError
from mediafire_client.models.imports import (
    AlreadyOwned,
    Failed,
    Fatal,
    HashTriple,
    ImportLine,
    ImportOutcome,
    ImportReport,
    NotFound,
    ShareLink,
    Success,
)
from mediafire_client.services.line_parser import LineParser

logger = structlog.get_logger(__name__)


class ImportService:
    """
    Resolves input lines into instant uploads.

    Lines are processed strictly in order, each awaited before the next.
    Failures that would most likely repeat on every following line (lookup
    errors, unexpected API errors, privacy update errors) stop the run; an
    unknown hash on a hash line does not.
    """

    def __init__(self, http: AsyncHttpClient, config: MediaFireConfig) -> None:
        """
        Args:
            http: Async HTTP client.
            config: Client configuration, used for the service host.
        """
        self._http = http
        self._config = config
        self._parser = LineParser(config.service_host)

    async def run(
        self,
        lines: Iterable[str],
        *,
        make_private: bool = False,
        folder_key: str | None = None,
        abort_on_error: bool = True,
    ) -> ImportReport:
        """
        Import every line and collect the outcomes.

        Args:
            lines: Input lines (hash triples or share links).
            make_private: Mark each added file private.
            folder_key: Destination folder, account root if omitted.
            abort_on_error: Stop at the first fatal outcome. When False,
                fatal outcomes are reported as Failed and the run goes on.

        Returns:
            ImportReport with outcomes in input order.
        """
        report = ImportReport()
        async for outcome in self._process(
            lines,
            report,
            make_private=make_private,
            folder_key=folder_key,
            abort_on_error=abort_on_error,
        ):
            report.outcomes.append(outcome)
        return report

    async def import_lines(
        self,
        lines: Iterable[str],
        *,
        make_private: bool = False,
        folder_key: str | None = None,
        abort_on_error: bool = True,
    ) -> AsyncGenerator[ImportOutcome, None]:
        """
        Import lines, yielding each outcome as soon as it is known.

        Yields:
            Outcomes in input order. A Fatal outcome ends the stream (after
            the Success of the same line if only its privacy update failed).
        """
        async for outcome in self._process(
            lines,
            ImportReport(),
            make_private=make_private,
            folder_key=folder_key,
            abort_on_error=abort_on_error,
        ):
            yield outcome

    async def _process(
        self,
        lines: Iterable[str],
        report: ImportReport,
        *,
        make_private: bool,
        folder_key: str | None,
        abort_on_error: bool,
    ) -> AsyncGenerator[ImportOutcome, None]:
        for number, raw in enumerate(lines, start=1):
            entry = self._parser.parse(raw)
            if entry is None:
                if raw.strip():
                    logger.info("Skipping unrecognized line", line=number)
                else:
                    logger.debug("Skipping empty line", line=number)
                report.skipped += 1
                continue

            outcomes, stop = await self._import_one(
                entry, make_private=make_private, folder_key=folder_key
            )
            if not abort_on_error:
                outcomes = [_soften(outcome) for outcome in outcomes]
                stop = False

            for outcome in outcomes:
                _log_outcome(outcome, line=number)
                yield outcome

            if stop:
                logger.error("Import aborted", line=number)
                report.aborted = True
                return

    async def _import_one(
        self,
        entry: ImportLine,
        *,
        make_private: bool,
        folder_key: str | None,
    ) -> tuple[list[ImportOutcome], bool]:
        """
        Import one parsed line.

        Returns:
            Outcomes for the line and whether the run must stop.
        """
        if isinstance(entry, ShareLink):
            identifier = entry.quick_key
            try:
                info = await get_info(self._http, entry.quick_key)
            except MediaFireError as e:
                return [Fatal(identifier=identifier, message=e.message)], True
            filename, size, sha256 = info.filename, info.size, info.sha256
        else:
            identifier = entry.filename
            filename, size, sha256 = entry.filename, entry.size, entry.sha256

        try:
            quick_key = await instant(
                self._http,
                filename=filename,
                size=size,
                sha256=sha256,
                folder_key=folder_key,
            )
        except HashNotFoundError as e:
            if isinstance(entry, HashTriple):
                return [NotFound(filename=filename)], False
            return [Fatal(identifier=identifier, message=e.message)], True
        except MediaFireError as e:
            return [Fatal(identifier=identifier, message=e.message)], True

        if quick_key is None:
            return [AlreadyOwned(filename=filename)], False

        outcomes: list[ImportOutcome] = []
        stop = False
        if make_private:
            try:
                await set_privacy(self._http, quick_key, "private")
            except MediaFireError as e:
                outcomes.append(Fatal(identifier=quick_key, message=e.message))
                stop = True

        outcomes.append(
            Success(quick_key=quick_key, filename=filename, link=self._config.file_link(quick_key))
        )
        return outcomes, stop


def _soften(outcome: ImportOutcome) -> ImportOutcome:
    if isinstance(outcome, Fatal):
        return Failed(identifier=outcome.identifier, message=outcome.message)
    return outcome


def _log_outcome(outcome: ImportOutcome, *, line: int) -> None:
    match outcome:
        case Success():
            logger.info("File added", line=line, filename=outcome.filename, link=outcome.link)
        case AlreadyOwned():
            logger.info("File already in account", line=line, filename=outcome.filename)
        case NotFound():
            logger.warning("Hash not found on server", line=line, filename=outcome.filename)
        case Failed():
            logger.warning(
                "Import failed", line=line, identifier=outcome.identifier, error=outcome.message
            )
        case Fatal():
            logger.error(
                "Import failed", line=line, identifier=outcome.identifier, error=outcome.message
            )
