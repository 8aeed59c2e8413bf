"""
Tests for adapters/credentials/*

Construction must never touch the environment, disk or network; only
get_credentials does.
"""

import json

import httpx
import pytest

from adapters.credentials import (
    CredentialsProviderChain,
    DefaultAWSCredentialsProviderChain,
    EnvironmentVariableCredentialsProvider,
    InstanceProfileCredentialsProvider,
    ProfileCredentialsProvider,
    StaticCredentialsProvider,
)
from core.config import AppSettings
from core.domain.errors import CredentialsUnavailableError
from core.domain.models import AWSCredentials


# ---------------------------------------------------------------- environment


def test_environment_provider_reads_variables():
    provider = EnvironmentVariableCredentialsProvider(
        {"AWS_ACCESS_KEY_ID": "AKID", "AWS_SECRET_ACCESS_KEY": "secret", "AWS_SESSION_TOKEN": "tok"}
    )

    credentials = provider.get_credentials()

    assert credentials.access_key_id == "AKID"
    assert credentials.secret_access_key.get_secret_value() == "secret"
    assert credentials.session_token.get_secret_value() == "tok"


def test_environment_provider_accepts_legacy_names():
    provider = EnvironmentVariableCredentialsProvider({"AWS_ACCESS_KEY": "AKID", "AWS_SECRET_KEY": "secret"})

    assert provider.get_credentials().session_token is None


def test_environment_provider_fails_only_on_use(monkeypatch):
    monkeypatch.delenv("AWS_ACCESS_KEY_ID", raising=False)
    monkeypatch.delenv("AWS_ACCESS_KEY", raising=False)
    monkeypatch.delenv("AWS_SECRET_ACCESS_KEY", raising=False)
    monkeypatch.delenv("AWS_SECRET_KEY", raising=False)

    provider = EnvironmentVariableCredentialsProvider()

    with pytest.raises(CredentialsUnavailableError):
        provider.get_credentials()


def test_secret_is_not_leaked_in_repr():
    credentials = EnvironmentVariableCredentialsProvider(
        {"AWS_ACCESS_KEY_ID": "AKID", "AWS_SECRET_ACCESS_KEY": "very-secret"}
    ).get_credentials()

    assert "very-secret" not in repr(credentials)


# -------------------------------------------------------------------- profile

CREDENTIALS_FILE = """
[default]
aws_access_key_id = DEFAULTKEY
aws_secret_access_key = defaultsecret

[dev]
aws_access_key_id = DEVKEY
aws_secret_access_key = devsecret
aws_session_token = devtoken

[empty]
region = eu-west-1
"""


@pytest.fixture
def credentials_file(tmp_path):
    path = tmp_path / "credentials"
    path.write_text(CREDENTIALS_FILE, encoding="utf-8")
    return path


def test_profile_provider_reads_named_profile(credentials_file):
    provider = ProfileCredentialsProvider(AppSettings(), profile="dev", path=credentials_file)

    credentials = provider.get_credentials()

    assert credentials.access_key_id == "DEVKEY"
    assert credentials.session_token.get_secret_value() == "devtoken"


def test_profile_provider_uses_settings(credentials_file, monkeypatch):
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    settings = AppSettings(aws_credentials_file=credentials_file)

    assert ProfileCredentialsProvider(settings).get_credentials().access_key_id == "DEFAULTKEY"


def test_profile_provider_uses_aws_profile_env(credentials_file, monkeypatch):
    monkeypatch.setenv("AWS_PROFILE", "dev")
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(credentials_file))

    assert ProfileCredentialsProvider(AppSettings()).get_credentials().access_key_id == "DEVKEY"


def test_profile_provider_caches_until_refresh(credentials_file):
    provider = ProfileCredentialsProvider(AppSettings(), profile="dev", path=credentials_file)
    provider.get_credentials()

    credentials_file.write_text(CREDENTIALS_FILE.replace("DEVKEY", "ROTATED"), encoding="utf-8")

    assert provider.get_credentials().access_key_id == "DEVKEY"
    provider.refresh()
    assert provider.get_credentials().access_key_id == "ROTATED"


@pytest.mark.parametrize("profile", ["missing", "empty"])
def test_profile_provider_errors(credentials_file, profile):
    provider = ProfileCredentialsProvider(AppSettings(), profile=profile, path=credentials_file)

    with pytest.raises(CredentialsUnavailableError):
        provider.get_credentials()


def test_profile_provider_missing_file(tmp_path):
    provider = ProfileCredentialsProvider(AppSettings(), path=tmp_path / "nope")

    with pytest.raises(CredentialsUnavailableError):
        provider.get_credentials()


# ---------------------------------------------------------- instance metadata


def _metadata_handler(calls, *, token_status=200):
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append((request.method, request.url.path, request.headers.get("X-aws-ec2-metadata-token")))
        if request.method == "PUT" and request.url.path == "/latest/api/token":
            return httpx.Response(token_status, text="imds-token" if token_status == 200 else "")
        if request.url.path == "/latest/meta-data/iam/security-credentials/":
            return httpx.Response(200, text="worker-role\n")
        if request.url.path == "/latest/meta-data/iam/security-credentials/worker-role":
            body = {
                "Code": "Success",
                "AccessKeyId": "ROLEKEY",
                "SecretAccessKey": "rolesecret",
                "Token": "roletoken",
                "Expiration": "2999-01-01T00:00:00Z",
            }
            return httpx.Response(200, text=json.dumps(body))
        return httpx.Response(404)

    return handler


def test_instance_provider_does_no_io_on_construction():
    calls = []
    InstanceProfileCredentialsProvider(AppSettings(), transport=httpx.MockTransport(_metadata_handler(calls)))

    assert calls == []


def test_instance_provider_uses_imdsv2_token_and_caches():
    calls = []
    provider = InstanceProfileCredentialsProvider(
        AppSettings(), transport=httpx.MockTransport(_metadata_handler(calls))
    )

    credentials = provider.get_credentials()
    provider.get_credentials()

    assert credentials.access_key_id == "ROLEKEY"
    assert credentials.session_token.get_secret_value() == "roletoken"
    assert len(calls) == 3
    assert calls[1][2] == "imds-token"


def test_instance_provider_falls_back_without_token():
    calls = []
    provider = InstanceProfileCredentialsProvider(
        AppSettings(), transport=httpx.MockTransport(_metadata_handler(calls, token_status=405))
    )

    assert provider.get_credentials().access_key_id == "ROLEKEY"
    assert calls[1][2] is None


def test_instance_provider_wraps_network_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("no route to host", request=request)

    provider = InstanceProfileCredentialsProvider(AppSettings(), transport=httpx.MockTransport(handler))

    with pytest.raises(CredentialsUnavailableError):
        provider.get_credentials()


# ---------------------------------------------------------------------- chain


class _Unavailable:
    def __init__(self):
        self.refreshed = False

    def get_credentials(self):
        raise CredentialsUnavailableError("nothing here")

    def refresh(self):
        self.refreshed = True


def _static(key):
    return StaticCredentialsProvider(AWSCredentials(access_key_id=key, secret_access_key="s"))


def test_chain_returns_first_available_and_remembers_it():
    first = _Unavailable()
    chain = CredentialsProviderChain([first, _static("SECOND"), _static("THIRD")])

    assert chain.get_credentials().access_key_id == "SECOND"
    assert chain.get_credentials().access_key_id == "SECOND"

    chain.refresh()
    assert first.refreshed is True


def test_chain_fails_when_every_provider_fails():
    chain = CredentialsProviderChain([_Unavailable(), _Unavailable()])

    with pytest.raises(CredentialsUnavailableError) as excinfo:
        chain.get_credentials()

    assert "nothing here" in str(excinfo.value)


def test_default_chain_prefers_environment(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "ENVKEY")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "envsecret")

    assert DefaultAWSCredentialsProviderChain().get_credentials().access_key_id == "ENVKEY"


# ------------------------------------------------------------- lazy settings


def test_providers_ignore_bad_settings_until_used(monkeypatch):
    monkeypatch.setenv("KCL_BOOTSTRAP_METADATA_TIMEOUT_SECONDS", "0")

    provider = InstanceProfileCredentialsProvider()
    ProfileCredentialsProvider()
    DefaultAWSCredentialsProviderChain()

    with pytest.raises(CredentialsUnavailableError):
        provider.get_credentials()
