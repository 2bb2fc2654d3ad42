from pathlib import Path

import pytest

from src.business_objects.common import Address
from src.business_objects.config import StorageConfig
from src.business_objects.customer import Customer
from src.business_objects.errors import InvalidArgumentError, StorageError
from src.repositories.customer_repository import CustomerRepository

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def fixture_repo() -> CustomerRepository:
    return CustomerRepository.from_config(StorageConfig(data_dir=str(DATA_DIR)))


def write_csv(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_all_reads_every_row_in_order():
    customers = fixture_repo().load_all()

    assert len(customers) == 35
    assert [c.id for c in customers] == list(range(1, 36))
    for c in customers:
        assert isinstance(c, Customer)
        assert isinstance(c.id, int)
        assert isinstance(c.address, Address)


def test_find_returns_matching_customer():
    repo = fixture_repo()
    customer = repo.find(25)
    assert customer is not None
    assert customer.id == 25


def test_find_returns_none_when_absent():
    assert fixture_repo().find(36) is None


def test_find_uses_preloaded_customers_first_match(tmp_path):
    repo = CustomerRepository(tmp_path / "missing.csv")
    first = Customer(5, "first@x.co", {"street": "1 A", "city": "B", "state": "C", "zip": "1"})
    second = Customer(5, "second@x.co", {"street": "2 A", "city": "B", "state": "C", "zip": "2"})

    # The file does not exist, so this only works without touching storage.
    assert repo.find(5, customers=[first, second]) is first
    assert repo.find(6, customers=[first, second]) is None


def test_save_then_load_round_trips(tmp_path):
    repo = fixture_repo()
    original = repo.load_all()
    destination = tmp_path / "customers_copy.csv"

    repo.save_all(original, destination)
    reloaded = CustomerRepository(destination).load_all()

    assert reloaded == original
    assert reloaded is not original


def test_save_overwrites_destination(tmp_path):
    destination = write_csv(tmp_path / "out.csv", "junk,that,should,go,away,now\nmore,junk\n")
    customer = Customer(1, "a@a.co", Address("123 Main", "Seattle", "WA", "98101"))

    CustomerRepository(tmp_path / "unused.csv").save_all([customer], destination)

    assert destination.read_text(encoding="utf-8").splitlines() == ["1,a@a.co,123 Main,Seattle,WA,98101"]


def test_save_to_unwritable_destination_raises(tmp_path):
    customer = Customer(1, "a@a.co", Address("123 Main", "Seattle", "WA", "98101"))
    destination = tmp_path / "no_such_dir" / "out.csv"

    with pytest.raises(StorageError):
        CustomerRepository(tmp_path / "unused.csv").save_all([customer], destination)


def test_missing_file_raises_storage_error(tmp_path):
    with pytest.raises(StorageError):
        CustomerRepository(tmp_path / "nope.csv").load_all()


def test_wrong_column_count_raises_storage_error(tmp_path):
    path = write_csv(tmp_path / "customers.csv", "1,a@a.co,123 Main,Seattle,WA\n")
    with pytest.raises(StorageError) as exc:
        CustomerRepository(path).load_all()
    assert ":1:" in str(exc.value)


def test_non_numeric_id_raises_storage_error(tmp_path):
    path = write_csv(
        tmp_path / "customers.csv",
        "1,a@a.co,123 Main,Seattle,WA,98101\n\nx,b@b.co,1 Elm,Boise,ID,83701\n",
    )
    with pytest.raises(StorageError) as exc:
        CustomerRepository(path).load_all()
    assert ":3:" in str(exc.value)


def test_customer_id_is_read_only_but_contact_fields_are_not():
    customer = Customer(1, "a@a.co", {"street": "1 A", "city": "B", "state": "C", "zip": "1"})

    customer.email = "new@a.co"
    customer.address.city = "Tacoma"
    assert customer.email == "new@a.co"
    assert customer.address.city == "Tacoma"

    with pytest.raises(AttributeError):
        customer.id = 2


@pytest.mark.parametrize(
    "row, column",
    [
        ("1,,1 Main,Seattle,WA,98101\n", "email"),
        ("1,a@a.co,,Seattle,WA,98101\n", "street"),
        ("1,a@a.co,1 Main,  ,WA,98101\n", "city"),
        ("1,a@a.co,1 Main,Seattle,WA,\n", "zip"),
        (" ,a@a.co,1 Main,Seattle,WA,98101\n", "id"),
    ],
)
def test_empty_required_field_raises_storage_error(tmp_path, row, column):
    path = write_csv(tmp_path / "customers.csv", row)
    with pytest.raises(StorageError) as exc:
        CustomerRepository(path).load_all()
    assert f"empty {column}" in str(exc.value)


def test_whitespace_only_row_raises_storage_error(tmp_path):
    path = write_csv(tmp_path / "customers.csv", "1,a@a.co,1 Main,Seattle,WA,98101\n , , , , , \n")
    with pytest.raises(StorageError) as exc:
        CustomerRepository(path).load_all()
    assert ":2:" in str(exc.value)


def test_boolean_customer_id_rejected():
    with pytest.raises(InvalidArgumentError):
        Customer(True, "a@a.co", Address("123 Main", "Seattle", "WA", "98101"))
