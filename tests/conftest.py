"""
Pytest configuration file.

Ensures `src/` is on sys.path so that `import core...` works without an
editable install, and provides stub credentials providers.
"""
import sys
from pathlib import Path

import pytest

src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from core.domain.models import AWSCredentials  # noqa: E402
from core.services.configurator import WorkerConfigurator  # noqa: E402
from core.services.credentials_resolver import CredentialsProviderRegistry  # noqa: E402

SUCCEED = "AlwaysSucceedCredentialsProvider"
FAIL = "AlwaysFailCredentialsProvider"
BROKEN = "BrokenConstructorCredentialsProvider"


class AlwaysSucceedCredentialsProvider:
    """Constructs fine and always hands out credentials."""

    def get_credentials(self) -> AWSCredentials:
        return AWSCredentials(access_key_id="AKIDEXAMPLE1234", secret_access_key="secret")

    def refresh(self) -> None:
        pass


class AlwaysFailCredentialsProvider:
    """Constructs fine but fails as soon as credentials are requested."""

    def get_credentials(self) -> AWSCredentials:
        raise ValueError("always fails")

    def refresh(self) -> None:
        pass


class BrokenConstructorCredentialsProvider:
    """Cannot even be constructed."""

    def __init__(self) -> None:
        raise RuntimeError("cannot construct")


@pytest.fixture
def registry() -> CredentialsProviderRegistry:
    return CredentialsProviderRegistry(
        {
            SUCCEED: AlwaysSucceedCredentialsProvider,
            FAIL: AlwaysFailCredentialsProvider,
            BROKEN: BrokenConstructorCredentialsProvider,
        }
    )


@pytest.fixture
def configurator(registry: CredentialsProviderRegistry) -> WorkerConfigurator:
    return WorkerConfigurator(registry=registry)


def properties(*lines: str) -> str:
    return "\n".join(lines)
