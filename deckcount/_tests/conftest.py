import json

import pytest


# Cards a, b, c with one, two and three copies allowed
ABC_LIMITS = [1, 2, 3]


@pytest.fixture
def abc_limits():
    return list(ABC_LIMITS)


@pytest.fixture
def catalog_records():
    """A small catalog in the AllCards-x.json layout: a mapping of card name to
    a record with a type line and a list of per-format legalities."""

    def legalities(**kwargs):
        return [{"format": k, "legality": v} for k, v in kwargs.items()]

    return {
        "Island": {
            "name": "Island",
            "type": "Basic Land - Island",
            "legalities": legalities(
                Standard="Legal", Modern="Legal", Vintage="Legal"
            ),
        },
        "Black Lotus": {
            "name": "Black Lotus",
            "type": "Artifact",
            "legalities": legalities(
                Legacy="Banned", Vintage="Restricted"
            ),
        },
        "Lightning Bolt": {
            "name": "Lightning Bolt",
            "type": "Instant",
            "legalities": legalities(
                Modern="Legal", Legacy="Legal", Vintage="Legal"
            ),
        },
        "Opt": {
            "name": "Opt",
            "type": "Instant",
            "legalities": legalities(
                Standard="Legal", Modern="Legal", Vintage="Legal"
            ),
        },
        "Time Vault": {
            "name": "Time Vault",
            "type": "Artifact",
            "legalities": legalities(Vintage="Restricted"),
        },
        "Chaos Orb": {
            "name": "Chaos Orb",
            "type": "Artifact",
            "legalities": legalities(Legacy="Banned", Vintage="Banned"),
        },
    }


@pytest.fixture
def catalog_file(tmp_path, catalog_records):
    path = tmp_path / "AllCards-x.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(catalog_records, f)
    return path


## add this so slow tests are skipped by default
def pytest_addoption(parser):
    parser.addoption(
        "--runslow", action="store_true", default=False, help="run slow tests"
    )

def pytest_configure(config):
    config.addinivalue_line("markers", "slow: mark test as slow to run")

def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        # --runslow given in cli: do not skip slow tests
        return
    skip_slow = pytest.mark.skip(reason="need --runslow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)
