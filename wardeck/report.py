"""CSV round report: one header, then one record per round."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Final

from .deck import Deck
from .errors import MalformedInput, SinkUnavailable, SourceUnavailable
from .logging_utils import get_logger

__all__ = ["REPORT_HEADER", "RoundRecord", "ReportWriter", "read_report"]

logger = get_logger(__name__)

REPORT_HEADER: Final[tuple[str, ...]] = (
    "Round",
    "PlayerA_Count",
    "PlayerB_Count",
    "PlayerA_Cards",
    "PlayerB_Cards",
)


@dataclass(frozen=True, slots=True)
class RoundRecord:
    """One parsed report row; card columns keep their rendered text."""

    round_number: int
    count_a: int
    count_b: int
    cards_a: str
    cards_b: str


class ReportWriter:
    """Append-only report session bound to a single destination file.

    The destination is truncated and the header written on construction.
    """

    def __init__(self, path: str | Path, *, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        try:
            self._handle = open(self.path, "w", encoding=encoding, newline="")
        except OSError as exc:
            raise SinkUnavailable(str(path), exc.strerror or str(exc)) from exc
        try:
            csv.writer(self._handle, lineterminator="\n").writerow(REPORT_HEADER)
        except OSError as exc:
            self._handle.close()
            raise SinkUnavailable(str(path), exc.strerror or str(exc)) from exc
        self._writer = csv.writer(self._handle, lineterminator="\n", quoting=csv.QUOTE_NONNUMERIC)
        self.rounds_written = 0
        logger.debug("report session opened at %s", self.path)

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def write_round(self, round_number: int, deck_a: Deck, deck_b: Deck) -> None:
        """Record the sizes and contents of both decks for ``round_number``."""

        if self._handle.closed:
            raise ValueError("report session is closed")
        self._writer.writerow(
            [round_number, deck_a.size(), deck_b.size(), deck_a.render(), deck_b.render()]
        )
        self.rounds_written += 1

    def close(self) -> None:
        if self._handle.closed:
            return
        self._handle.close()
        logger.debug("report session closed after %d round(s)", self.rounds_written)

    def __enter__(self) -> "ReportWriter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _parse_count(value: str, row_number: int, column: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise MalformedInput(f"{column} {value!r} is not an integer", line_number=row_number) from exc


def read_report(path: str | Path, *, encoding: str = "utf-8") -> list[RoundRecord]:
    """Parse a report written by :class:`ReportWriter`."""

    try:
        with open(path, encoding=encoding, newline="") as handle:
            rows = list(csv.reader(handle))
    except OSError as exc:
        raise SourceUnavailable(str(path), exc.strerror or str(exc)) from exc

    if not rows or tuple(rows[0]) != REPORT_HEADER:
        raise MalformedInput("missing or unexpected report header", line_number=1)

    records: list[RoundRecord] = []
    for row_number, row in enumerate(rows[1:], start=2):
        if len(row) != len(REPORT_HEADER):
            raise MalformedInput(f"expected {len(REPORT_HEADER)} fields, found {len(row)}", line_number=row_number)
        records.append(
            RoundRecord(
                round_number=_parse_count(row[0], row_number, "round"),
                count_a=_parse_count(row[1], row_number, "PlayerA_Count"),
                count_b=_parse_count(row[2], row_number, "PlayerB_Count"),
                cards_a=row[3],
                cards_b=row[4],
            )
        )
    return records
