from typing import Any

import pytest


@pytest.fixture(scope="function")
def dog() -> dict[str, Any]:
    return {
        "age": 21,
        "species": {"variant": "Golden Retriever", "location": "Scotland"},
    }


@pytest.fixture(scope="function")
def dog_fields() -> list[tuple[str, Any]]:
    return [
        ("age", "number"),
        ("species", [("variant", "string"), ("location", "string")]),
    ]


@pytest.fixture(scope="function")
def kennel() -> dict[str, Any]:
    return {
        "name": "Highland Paws",
        "owner": {
            "name": "Morag",
            "address": {"city": "Inverness", "postcode": "IV1 1AA"},
        },
        "open": True,
    }
