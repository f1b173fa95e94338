"""Unit tests for the Supplier aggregate."""

from datetime import datetime, timezone

import pytest

from pricetrack.domain.exceptions import ValidationError
from pricetrack.domain.model.supplier import Supplier

T0 = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
T1 = datetime(2024, 1, 2, 9, 0, tzinfo=timezone.utc)


class TestSupplierCreate:

    def test_assigns_identity_and_timestamps(self):
        s = Supplier.create(name="Metro", phone="555-1234", now=T0)
        assert s.id
        assert s.created_at == T0
        assert s.updated_at == T0

    def test_strips_fields(self):
        s = Supplier.create(name="  Metro ", phone=" 555 ", contact=" Ann ")
        assert s.name == "Metro"
        assert s.phone == "555"
        assert s.contact == "Ann"

    def test_name_required(self):
        with pytest.raises(ValidationError, match="Supplier name is required"):
            Supplier.create(name="  ", phone="555")

    def test_phone_required(self):
        with pytest.raises(ValidationError, match="Phone number is required"):
            Supplier.create(name="Metro", phone="")

    def test_two_suppliers_get_different_ids(self):
        a = Supplier.create(name="A", phone="1", now=T0)
        b = Supplier.create(name="B", phone="2", now=T0)
        assert a.id != b.id


class TestSupplierUpdate:

    def test_only_updated_at_moves(self):
        s = Supplier.create(name="Metro", phone="555", now=T0)
        original_id = s.id
        s.update({"name": "Metro Cash", "notes": None}, now=T1)
        assert s.name == "Metro Cash"
        assert s.id == original_id
        assert s.created_at == T0
        assert s.updated_at == T1

    def test_none_leaves_field_unchanged(self):
        s = Supplier.create(name="Metro", phone="555", notes="weekly", now=T0)
        s.update({"notes": None}, now=T1)
        assert s.notes == "weekly"

    def test_blank_name_rejected_and_nothing_changes(self):
        s = Supplier.create(name="Metro", phone="555", now=T0)
        with pytest.raises(ValidationError):
            s.update({"phone": "777", "name": " "}, now=T1)
        assert s.phone == "555"
        assert s.updated_at == T0

    def test_unknown_field_rejected(self):
        s = Supplier.create(name="Metro", phone="555")
        with pytest.raises(ValidationError, match="Unknown supplier field"):
            s.update({"id": "hijack"})


class TestSupplierMatches:

    def test_search_is_case_insensitive_over_all_text_fields(self):
        s = Supplier.create(name="Metro", phone="555", address="Main Street")
        assert s.matches("metro")
        assert s.matches("MAIN")
        assert not s.matches("harbour")
