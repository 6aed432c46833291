import pytest

from evtforward import Environment, ForwarderConfig, set_config


@pytest.fixture(autouse=True)
def testing_config():
    """Every test starts from the TESTING configuration."""
    config = ForwarderConfig.for_environment(Environment.TESTING)
    set_config(config)
    yield config
    set_config(None)
