"""Configuration that cargo serialization depends on."""

import tomllib
from pathlib import Path

import pytest
from shipping import domain

CONFIG = Path(domain.__file__).parent / "domain.toml"


@pytest.fixture(scope="module")
def config():
    with CONFIG.open("rb") as f:
        return tomllib.load(f)


@pytest.mark.parametrize("section", [None, "production"])
def test_event_handlers_run_in_the_requesting_process(config, section):
    settings = config if section is None else config[section]
    assert settings["event_processing"] == "sync"
    assert settings["command_processing"] == "sync"


def test_initialized_domain_processes_events_synchronously():
    from protean import current_domain

    assert current_domain.config["event_processing"] == "sync"
