"""Append-only audit log file.

One line per recorded checkout, in a fixed format. The file is opened in
append mode so it accumulates across runs; it is never truncated here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from pos.domain.repository.audit_trail import AuditTrail

logger = logging.getLogger(__name__)

LINE_FORMAT = (
    "[LOG] -> Order ID: {order_id} has been successfully checked out "
    "and paid using {payment_label}."
)


class FileAuditLog(AuditTrail):
    """Writes checkout facts to a text file.

    The file is opened lazily, on the first ``log`` call, and only once.
    If it cannot be opened the failure is logged and every later ``log``
    is a no-op: a missing audit trail never aborts a checkout.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._file: TextIO | None = None
        self._open_attempted = False
        self._closed = False

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def is_open(self) -> bool:
        return self._file is not None

    # --- AuditTrail interface -------------------------------------------------

    def log(self, order_id: int, payment_label: str) -> None:
        stream = self._ensure_open()
        if stream is None:
            return
        try:
            stream.write(
                LINE_FORMAT.format(order_id=order_id, payment_label=payment_label) + "\n"
            )
            stream.flush()
        except OSError as exc:
            logger.warning("Failed to write audit line for order #%d: %s", order_id, exc)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
        self._closed = True

    # --- Context manager ------------------------------------------------------

    def __enter__(self) -> FileAuditLog:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- File helpers ---------------------------------------------------------

    def _ensure_open(self) -> TextIO | None:
        if self._open_attempted or self._closed:
            return self._file
        self._open_attempted = True
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file = self._file_path.open("a", encoding="utf-8")
        except OSError as exc:
            logger.warning(
                "Audit log %s unavailable, checkouts will not be audited: %s",
                self._file_path, exc,
            )
            self._file = None
        return self._file
