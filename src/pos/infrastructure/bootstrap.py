"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
It also owns the process-wide pieces: the audit log and the order id
sequence are built once per process and shared by every session.
"""

from __future__ import annotations

import atexit
from pathlib import Path

from pos.application.session import PosSession
from pos.domain.model.order import OrderIdSequence
from pos.domain.model.payment import Emit
from pos.domain.repository.product_catalog import ProductCatalog
from pos.infrastructure.audit.file_audit_log import FileAuditLog
from pos.infrastructure.config import PosSettings
from pos.infrastructure.persistence.in_memory_product_catalog import (
    InMemoryProductCatalog,
)
from pos.infrastructure.persistence.json_product_catalog import JsonProductCatalog

_audit_log: FileAuditLog | None = None
_id_sequence: OrderIdSequence | None = None


def audit_log(path: Path) -> FileAuditLog:
    """Return the process-wide audit log, creating it on first call.

    Later calls return the same instance whatever ``path`` they pass.
    The file is closed when a ``shop`` session ends and, failing that, at
    interpreter exit; closing twice is harmless.
    """
    global _audit_log
    if _audit_log is None:
        _audit_log = FileAuditLog(path)
        atexit.register(_audit_log.close)
    return _audit_log


def order_id_sequence() -> OrderIdSequence:
    global _id_sequence
    if _id_sequence is None:
        _id_sequence = OrderIdSequence()
    return _id_sequence


def product_catalog(path: Path | None = None) -> ProductCatalog:
    if path is None:
        return InMemoryProductCatalog()
    return JsonProductCatalog(path)


def pos_session(settings: PosSettings, emit: Emit) -> PosSession:
    return PosSession(
        catalog=product_catalog(settings.catalog_path),
        audit_trail=audit_log(settings.audit_log_path),
        emit=emit,
        id_sequence=order_id_sequence(),
        cart_capacity=settings.cart_capacity,
        history_capacity=settings.history_capacity,
    )
