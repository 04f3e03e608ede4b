import pytest

from erd_styling.clustering.ownership import reset_ownership_registry
from erd_styling.highlight.color_rule_schema import parse_color_rules


ENV_VARS = (
    "ERD_COLORS",
    "RAILS_ERD_COLORS",
    "ERD_PACKAGES_ROOTS",
    "ERD_DEPENDENCY_ROOTS",
    "ERD_PROJECT_ROOT",
    "ERD_OWNERSHIP_FILE",
)


@pytest.fixture(autouse=True)
def isolated_styling_env(monkeypatch, tmp_path):
    # Settings also read a .env file from the working directory.
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_ownership_registry()
    parse_color_rules.cache_clear()
    yield
    reset_ownership_registry()
