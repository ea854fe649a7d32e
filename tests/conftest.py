"""Shared fixtures for schema_guard tests."""
import pytest

from schema_guard import Validator


@pytest.fixture
def empty_validator():
    """A validator over an empty record, used to drive the engine methods directly."""
    return Validator({})


@pytest.fixture
def sensor_schema():
    """A schema mixing shorthand and verbose declarations."""
    return {
        "name": {"type": str, "required": True},
        "mode": {"type": str, "enum": ["fast", "safe"]},
        "rate": float,
        "enabled": bool,
        "tags": [str],
        "mount": {
            "frame": {"type": str, "required": True},
            "offset": [float, int],
        },
    }


@pytest.fixture
def sensor_validator(sensor_schema):
    return Validator(sensor_schema)
