import logging
from dataclasses import dataclass

import pytest

from ioc_container.builders import make_container
from ioc_container.errors import InvalidArgumentError


@dataclass(frozen=True)
class Database:
    dsn: str


@dataclass(frozen=True)
class Session:
    db: Database


def test_builds_empty_container():
    container = make_container()

    assert container.registered_services() == []
    assert container.parameter_names() == []


def test_services_resolve_against_parameters():
    container = make_container(
        services={
            "session": (lambda c: Session(c.make("db")), True),
            "db": lambda c: Database(c.get_parameter("dsn")),
        },
        parameters={"dsn": "sqlite://"},
    )

    first = container.make("session")
    second = container.make("session")

    assert first is not second
    assert first.db is second.db
    assert first.db == Database("sqlite://")


def test_plain_factory_is_registered_as_singleton():
    container = make_container(services={"db": lambda c: Database("sqlite://")})

    assert container.make("db") is container.make("db")


def test_malformed_service_entry_raises():
    with pytest.raises(InvalidArgumentError, match="Service 'db' must be a factory or"):
        make_container(services={"db": (lambda c: None, False, "extra")})


def test_non_boolean_flag_in_service_entry_raises():
    with pytest.raises(InvalidArgumentError, match="Factory argument must be boolean"):
        make_container(services={"db": (lambda c: None, "yes")})


def test_non_string_parameter_name_raises():
    with pytest.raises(InvalidArgumentError, match="Given parameter name must be a string"):
        make_container(parameters={1: "one"})


def test_registration_and_instantiation_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="ioc_container")

    container = make_container(
        services={"db": lambda c: Database(c.get_parameter("dsn"))},
        parameters={"dsn": "sqlite://"},
    )
    container.make("db")
    container.make("db")

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "Added parameter 'dsn'",
        "Registered service 'db' (singleton)",
        "Created singleton instance of 'db'",
    ]
