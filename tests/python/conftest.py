import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--run-statistical",
        action="store_true",
        default=False,
        help="run large-sample tests of the random vector constructors",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "statistical: marks large-sample distribution tests (use --run-statistical)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption("--run-statistical"):
        return

    skip_marker = pytest.mark.skip(
        reason="Large-sample distribution test (use --run-statistical)",
    )

    for item in items:
        if "statistical" in item.keywords:
            item.add_marker(skip_marker)


@pytest.fixture(autouse=True)
def _default_config():
    from vecalg.config import configure

    configure()
    yield
    configure()
