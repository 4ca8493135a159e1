"""
Tests for the read-only dataset
"""
import pytest
from pydantic import ValidationError

from secureapp_api.app.core.dataset import SEED_CUSTOMERS, Dataset, load_dataset
from secureapp_api.app.schemas.customer import Customer, CustomerStatus


class TestSeedDataset:
    def test_seed_sizes(self):
        dataset = load_dataset()
        assert len(dataset.customers) == 5
        assert len(dataset.commands) == 8
        assert dataset.count_by_status(CustomerStatus.ACTIVE) == 4
        assert dataset.count_by_status(CustomerStatus.INACTIVE) == 1

    def test_customer_ids_are_unique_and_ordered(self):
        assert [customer.id for customer in load_dataset().customers] == [1, 2, 3, 4, 5]

    def test_first_customer_fields(self):
        john = load_dataset().customers[0]
        assert john.full_name == "John Smith"
        assert john.email == "john.smith@email.com"
        assert john.phone == "+1-555-0123"
        assert john.address.zip_code == "10001"
        assert john.date_of_birth == "1985-03-15"
        assert john.customer_since == "2020-01-15"

    def test_command_answers(self):
        commands = load_dataset().commands
        assert commands["is-secure"] == "yes"
        assert commands["has-secrets"] == "no"
        assert set(commands.values()) == {"yes", "no"}


class TestImmutability:
    def test_commands_are_read_only(self):
        dataset = load_dataset()
        with pytest.raises(TypeError):
            dataset.commands["is-secure"] = "no"

    def test_customers_are_a_tuple(self):
        assert isinstance(load_dataset().customers, tuple)

    def test_records_are_frozen(self):
        customer = load_dataset().customers[0]
        with pytest.raises(ValidationError):
            customer.status = CustomerStatus.INACTIVE

    def test_dataset_fields_cannot_be_rebound(self):
        dataset = load_dataset()
        with pytest.raises(AttributeError):
            dataset.customers = ()

    def test_source_mapping_changes_do_not_leak(self):
        source = {"is-secure": "yes"}
        dataset = Dataset(customers=(), commands=source)
        source["is-secure"] = "no"
        assert dataset.commands["is-secure"] == "yes"


class TestValidation:
    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate customer ids"):
            Dataset(customers=(SEED_CUSTOMERS[0], SEED_CUSTOMERS[0]))

    def test_invalid_command_answer_rejected(self):
        with pytest.raises(ValueError, match="Command answers"):
            Dataset(commands={"is-secure": "maybe"})

    def test_invalid_status_rejected(self):
        data = SEED_CUSTOMERS[0].to_json()
        data["status"] = "suspended"
        with pytest.raises(ValidationError):
            Customer.model_validate(data)

    def test_custom_dataset(self):
        dataset = load_dataset(customers=SEED_CUSTOMERS[:2], commands={"is-secure": "yes"})
        assert [customer.id for customer in dataset.customers] == [1, 2]
        assert list(dataset.commands) == ["is-secure"]
