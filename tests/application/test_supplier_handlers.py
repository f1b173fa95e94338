"""Integration tests for the supplier use cases.

Uses in-memory fake repositories — no file I/O.
"""

import pytest

from pricetrack.application.add_supplier import AddSupplierHandler
from pricetrack.application.delete_supplier import DeleteSupplierHandler
from pricetrack.application.list_suppliers import ListSuppliersHandler
from pricetrack.application.update_supplier import UpdateSupplierHandler
from pricetrack.domain.exceptions import EntityNotFoundError, ValidationError
from tests.builders import make_entry, make_supplier
from tests.fakes import FakePriceEntryRepository, FakeSupplierRepository


class TestAddSupplier:

    def test_persists_supplier(self):
        repo = FakeSupplierRepository()
        supplier = AddSupplierHandler(repo).handle(name="Metro", phone="555-0101")
        assert repo.get_by_id(supplier.id) is supplier

    def test_missing_phone_rejected(self):
        repo = FakeSupplierRepository()
        with pytest.raises(ValidationError, match="Phone number is required"):
            AddSupplierHandler(repo).handle(name="Metro", phone="")
        assert repo.list_all() == []


class TestUpdateSupplier:

    def test_updates_fields_and_keeps_identity(self):
        original = make_supplier("s1", "Metro")
        repo = FakeSupplierRepository([original])
        updated = UpdateSupplierHandler(repo).handle("s1", name="Metro Cash", address=None)
        assert updated.id == "s1"
        assert updated.name == "Metro Cash"
        assert updated.created_at == original.created_at
        assert updated.updated_at > updated.created_at

    def test_unknown_supplier(self):
        with pytest.raises(EntityNotFoundError, match="Supplier with ID 'nope' not found"):
            UpdateSupplierHandler(FakeSupplierRepository()).handle("nope", name="X")


class TestDeleteSupplier:

    def test_cascades_to_price_entries(self):
        suppliers = FakeSupplierRepository([make_supplier("s1", "A"), make_supplier("s2", "B")])
        entries = FakePriceEntryRepository([
            make_entry("e1", "p1", "s1", 10, "2024-01-01"),
            make_entry("e2", "p2", "s1", 11, "2024-01-01"),
            make_entry("e3", "p1", "s2", 12, "2024-01-01"),
        ])

        removed = DeleteSupplierHandler(suppliers, entries).handle("s1")

        assert removed == 2
        assert suppliers.get_by_id("s1") is None
        assert [e.id for e in entries.list_all()] == ["e3"]

    def test_unknown_supplier_removes_nothing(self):
        entries = FakePriceEntryRepository([make_entry("e1", "p1", "s1", 10, "2024-01-01")])
        with pytest.raises(EntityNotFoundError):
            DeleteSupplierHandler(FakeSupplierRepository(), entries).handle("s1")
        assert len(entries.list_all()) == 1


class TestListSuppliers:

    def _repo(self):
        return FakeSupplierRepository([
            make_supplier("s1", "metro", address="Harbour Road"),
            make_supplier("s2", "Corner Shop"),
            make_supplier("s3", "Bazaar", notes="cash only"),
        ])

    def test_sorted_by_name_case_insensitive(self):
        names = [s.name for s in ListSuppliersHandler(self._repo()).handle()]
        assert names == ["Bazaar", "Corner Shop", "metro"]

    def test_descending(self):
        names = [s.name for s in ListSuppliersHandler(self._repo()).handle(direction="desc")]
        assert names == ["metro", "Corner Shop", "Bazaar"]

    def test_search_over_address_and_notes(self):
        handler = ListSuppliersHandler(self._repo())
        assert [s.id for s in handler.handle(search="harbour")] == ["s1"]
        assert [s.id for s in handler.handle(search="CASH")] == ["s3"]

    def test_bad_sort_key(self):
        with pytest.raises(ValidationError, match="Cannot sort by 'phone'"):
            ListSuppliersHandler(self._repo()).handle(sort_key="phone")

    def test_created_at_formatted(self):
        [dto] = ListSuppliersHandler(FakeSupplierRepository([make_supplier("s1", "A")])).handle()
        assert dto.created_at == "Jan 1, 2024"
