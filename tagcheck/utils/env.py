import base64
import os
import re
from collections.abc import Mapping

from tagcheck.models import RegistryCredentials


def registry_env_name(registry_url: str) -> str:
    """Turn a registry host into the prefix of its credential env vars.

    ``ghcr.io`` becomes ``GHCR_IO`` and ``registry-1.docker.io`` becomes
    ``REGISTRY_1_DOCKER_IO``.
    """
    host = re.sub(r"^[a-zA-Z]+://", "", registry_url).rstrip("/")
    return re.sub(r"[^A-Z0-9]", "_", host.upper())


def encode_token(value: str) -> str:
    return base64.b64encode(value.encode()).decode()


def encode_basic(user: str, password: str) -> str:
    return encode_token(f"{user}:{password}")


def load_credentials(registry_name: str, environ: Mapping[str, str] | None = None) -> RegistryCredentials:
    env = os.environ if environ is None else environ

    def read(key: str) -> str | None:
        # empty values count as unset
        return env.get(key) or None

    return RegistryCredentials(
        token=read(f"{registry_name}_TOKEN"),
        auth=read(f"{registry_name}_AUTH"),
        user=read(f"{registry_name}_USER"),
        password=read(f"{registry_name}_PASSWORD"),
        github_token=read("GITHUB_TOKEN"),
    )
