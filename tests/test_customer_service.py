"""
Unit tests for the customer selection functions
"""
import pytest

from secureapp_api.app.core.dataset import SEED_CUSTOMERS
from secureapp_api.app.schemas.customer import CustomerStatus
from secureapp_api.app.services.customer_service import CustomerService, parse_customer_id


@pytest.fixture
def service():
    return CustomerService(SEED_CUSTOMERS)


class TestFindById:
    """Exact id lookups"""

    @pytest.mark.parametrize("customer_id", [1, 2, 3, 4, 5])
    def test_returns_matching_record(self, service, customer_id):
        customer = service.find_by_id(customer_id)
        assert customer is not None
        assert customer.id == customer_id

    @pytest.mark.parametrize("customer_id", [0, 6, -1, 999, None])
    def test_unknown_id_returns_none(self, service, customer_id):
        assert service.find_by_id(customer_id) is None

    def test_ids_in_dataset_order(self, service):
        assert service.ids == [1, 2, 3, 4, 5]


class TestFilterByStatus:
    """Status subsets"""

    def test_active_subset(self, service):
        assert [c.id for c in service.filter_by_status(CustomerStatus.ACTIVE)] == [1, 2, 4, 5]

    def test_inactive_subset(self, service):
        assert [c.id for c in service.filter_by_status("inactive")] == [3]

    def test_partition_covers_dataset(self, service):
        active = {c.id for c in service.filter_by_status("active")}
        inactive = {c.id for c in service.filter_by_status("inactive")}
        assert active | inactive == set(service.ids)
        assert active & inactive == set()

    def test_unknown_status_matches_nothing(self, service):
        assert service.filter_by_status("archived") == ()

    def test_empty_dataset(self):
        assert CustomerService([]).filter_by_status("active") == ()


class TestSearch:
    """Case-insensitive substring search"""

    def test_case_insensitive(self, service):
        assert service.search("JOHN") == service.search("john")
        assert [c.id for c in service.search("john")] == [1, 2]

    def test_matches_first_name_last_name_or_email(self, service):
        assert [c.id for c in service.search("emily")] == [4]
        assert [c.id for c in service.search("wilson")] == [5]
        assert [c.id for c in service.search("michael.brown@")] == [3]

    def test_empty_query_returns_everything(self, service):
        assert service.search("") == service.customers

    def test_no_match(self, service):
        assert service.search("zzz") == ()

    def test_does_not_match_other_fields(self, service):
        # Cities and phone numbers are not searched.
        assert service.search("seattle") == ()
        assert service.search("555") == ()

    def test_preserves_dataset_order(self, service):
        ids = [c.id for c in service.search("email.com")]
        assert ids == sorted(ids) == [1, 2, 3, 4, 5]


class TestParseCustomerId:
    @pytest.mark.parametrize("raw,expected", [("1", 1), (" 42 ", 42), ("+3", 3), ("-2", -2), ("007", 7)])
    def test_integers(self, raw, expected):
        assert parse_customer_id(raw) == expected

    @pytest.mark.parametrize(
        "raw,expected", [("1.5", 1), ("2abc", 2), ("3e2", 3), ("1_0", 1), ("0x10", 0), ("\t4 items", 4)]
    )
    def test_leading_integer_wins(self, raw, expected):
        assert parse_customer_id(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", " ", "-", "x1", ".5"])
    def test_non_integers(self, raw):
        assert parse_customer_id(raw) is None
