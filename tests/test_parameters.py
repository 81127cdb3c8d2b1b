import pytest

from ioc_container.container import Container
from ioc_container.errors import (
    InvalidArgumentError,
    ParameterExistsError,
    ParameterNotFoundError,
)
from ioc_container.parameters import ParameterStore


@pytest.fixture
def container() -> Container:
    return Container()


def test_added_parameter_can_be_read(container):
    value = {"host": "localhost", "port": 5432}
    container.add_parameter("db", value)

    assert container.has_parameter("db")
    assert container.get_parameter("db") is value


def test_add_parameter_accepts_new_name_only(container):
    """Adding is only allowed for names not yet in use; changing a value goes through update.

    The inverted guard, which rejects names that do not exist yet, contradicts
    this documented rule and is deliberately not reproduced.
    """
    container.add_parameter("retries", 3)

    with pytest.raises(ParameterExistsError, match="Parameter with 'retries' name already exists"):
        container.add_parameter("retries", 5)

    assert container.get_parameter("retries") == 3


def test_update_replaces_existing_value(container):
    container.add_parameter("retries", 3)
    container.update_parameter("retries", 5)

    assert container.get_parameter("retries") == 5


def test_update_missing_parameter_raises(container):
    with pytest.raises(ParameterNotFoundError, match="Required parameter 'retries' not found"):
        container.update_parameter("retries", 5)

    assert not container.has_parameter("retries")


def test_get_missing_parameter_raises(container):
    with pytest.raises(ParameterNotFoundError, match="Required parameter 'retries' not found"):
        container.get_parameter("retries")


def test_remove_parameter(container):
    container.add_parameter("retries", 3)
    container.remove_parameter("retries")

    assert not container.has_parameter("retries")
    with pytest.raises(ParameterNotFoundError):
        container.get_parameter("retries")


def test_remove_missing_parameter_is_a_no_op(container):
    container.remove_parameter("retries")
    container.remove_parameter("retries")

    assert not container.has_parameter("retries")


def test_removed_parameter_can_be_added_again(container):
    container.add_parameter("retries", 3)
    container.remove_parameter("retries")
    container.add_parameter("retries", 7)

    assert container.get_parameter("retries") == 7


def test_none_is_a_valid_value(container):
    container.add_parameter("proxy", None)

    assert container.has_parameter("proxy")
    assert container.get_parameter("proxy") is None

    container.remove_parameter("proxy")
    assert not container.has_parameter("proxy")


def test_parameters_are_independent_of_services(container):
    container.add_parameter("db", "sqlite://")

    assert not container.has_service("db")
    container.register("db", lambda c: c.get_parameter("db"))
    assert container.make("db") == "sqlite://"


def test_parameter_names(container):
    container.add_parameter("b", 1)
    container.add_parameter("a", 2)

    assert container.parameter_names() == ["b", "a"]


@pytest.mark.parametrize("name", [None, 1, 1.5, b"name"])
def test_non_string_name_raises(container, name):
    operations = [
        lambda: container.add_parameter(name, "value"),
        lambda: container.get_parameter(name),
        lambda: container.update_parameter(name, "value"),
        lambda: container.remove_parameter(name),
        lambda: container.has_parameter(name),
    ]

    for operation in operations:
        with pytest.raises(InvalidArgumentError, match="Given parameter name must be a string"):
            operation()

    assert container.parameter_names() == []


def test_store_supports_membership_and_length():
    parameters = ParameterStore()
    parameters.add("dsn", "sqlite://")

    assert "dsn" in parameters
    assert "other" not in parameters
    assert len(parameters) == 1
