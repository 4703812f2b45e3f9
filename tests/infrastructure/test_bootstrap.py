"""Tests for the composition root's process-wide objects."""

import pytest

from pos.domain.model.payment import PaymentMethod
from pos.infrastructure import bootstrap
from pos.infrastructure.config import PosSettings
from pos.infrastructure.persistence.json_product_catalog import JsonProductCatalog


@pytest.fixture(autouse=True)
def fresh_process_state(monkeypatch):
    monkeypatch.setattr(bootstrap, "_audit_log", None)
    monkeypatch.setattr(bootstrap, "_id_sequence", None)


class TestBootstrap:

    def test_audit_log_is_a_single_instance(self, tmp_path):
        first = bootstrap.audit_log(tmp_path / "a.log")
        second = bootstrap.audit_log(tmp_path / "b.log")
        assert first is second
        assert first.file_path == tmp_path / "a.log"

    def test_sessions_share_the_order_sequence(self, tmp_path):
        settings = PosSettings(audit_log_path=tmp_path / "orders.log")
        lines = []
        s1 = bootstrap.pos_session(settings, lines.append)
        s2 = bootstrap.pos_session(settings, lines.append)
        assert s1.checkout(PaymentMethod.CASH).value.id == 1
        assert s2.checkout(PaymentMethod.CASH).value.id == 2
        bootstrap.audit_log(settings.audit_log_path).close()

    def test_json_catalog_selected_by_path(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text('[{"id": 1, "name": "Tea", "price": "1"}]', encoding="utf-8")
        assert isinstance(bootstrap.product_catalog(path), JsonProductCatalog)
