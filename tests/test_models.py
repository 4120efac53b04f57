"""Tests for domain models and value helpers."""

from decimal import Decimal

from propfolio.models import (
    AcquisitionCost,
    Documentation,
    DocumentationStatus,
    DocumentPriority,
    DocumentState,
    DocumentType,
    PropertyType,
    document_state_for,
    to_amount,
)


class TestToAmount:
    """Tests for numeric coercion."""

    def test_none_is_zero(self) -> None:
        assert to_amount(None) == Decimal("0")

    def test_decimal_passes_through(self) -> None:
        assert to_amount(Decimal("12.50")) == Decimal("12.50")

    def test_numbers_and_strings(self) -> None:
        assert to_amount(1500) == Decimal("1500")
        assert to_amount(2.5) == Decimal("2.5")
        assert to_amount("300") == Decimal("300")

    def test_malformed_values_are_zero(self) -> None:
        """Unparseable, NaN and infinite values never leak into totals."""
        assert to_amount("abc") == Decimal("0")
        assert to_amount(float("nan")) == Decimal("0")
        assert to_amount(float("inf")) == Decimal("0")
        assert to_amount(Decimal("NaN")) == Decimal("0")
        assert to_amount(True) == Decimal("0")


class TestAcquisitionCost:
    """Tests for the derived total cost."""

    def test_total_includes_fit_out(self) -> None:
        cost = AcquisitionCost(unit_lot_cost=Decimal("25000000"), fit_out_cost=Decimal("3000000"))

        assert cost.total_cost == Decimal("28000000")

    def test_missing_fit_out_counts_as_zero(self) -> None:
        cost = AcquisitionCost(unit_lot_cost=Decimal("15000000"))

        assert cost.total_cost == Decimal("15000000")


class TestDocumentState:
    """Tests for free-text status classification."""

    def test_pending_statuses(self) -> None:
        assert document_state_for("Missing Original") == DocumentState.PENDING
        assert document_state_for("For Submission") == DocumentState.PENDING

    def test_expired_status(self) -> None:
        assert document_state_for("Expired") == DocumentState.EXPIRED

    def test_available_statuses(self) -> None:
        assert document_state_for("Available (Original)") == DocumentState.AVAILABLE
        assert document_state_for("") == DocumentState.AVAILABLE
        assert document_state_for(None) == DocumentState.AVAILABLE

    def test_documentation_derives_state(self) -> None:
        doc = Documentation(document_type=DocumentType.TCT, status="Missing Original")

        assert doc.state == DocumentState.PENDING
        assert doc.priority == DocumentPriority.MEDIUM
        assert doc.name == "TCT"

    def test_state_override_is_kept(self) -> None:
        doc = Documentation(
            document_type=DocumentType.TD,
            status="Missing Original",
            state_override=DocumentState.AVAILABLE,
        )

        assert doc.state == DocumentState.AVAILABLE

    def test_state_follows_status_edits(self) -> None:
        doc = Documentation(document_type=DocumentType.TCT, status="Missing Original")

        doc.status = "Available (Original)"
        assert doc.state == DocumentState.AVAILABLE

        doc.status = "For Submission"
        assert doc.state == DocumentState.PENDING


class TestDocumentationStatus:
    """Tests for outstanding document names."""

    def test_outstanding_merges_declared_and_derived(self) -> None:
        status = DocumentationStatus(
            docs=[
                Documentation(document_type=DocumentType.TCT, status="Missing Original"),
                Documentation(document_type=DocumentType.TD, status="Available (Copy)"),
                Documentation(document_type=DocumentType.DOAS, status="For Submission"),
            ],
            pending_documents=["CTS", "TCT", ""],
        )

        assert status.outstanding() == ["CTS", "TCT", "DOAS"]

    def test_nothing_outstanding(self) -> None:
        assert DocumentationStatus().outstanding() == []


class TestEnums:
    """Tests for enum wire values."""

    def test_property_type_values(self) -> None:
        assert PropertyType.WAREHOUSE_AND_LOT.value == "Warehouse & Lot"
        assert PropertyType("Commercial Building") == PropertyType.COMMERCIAL_BUILDING
