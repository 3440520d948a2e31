import logging

import requests

from tagcheck.errors import MissingCredentialsError, RegistryError, TokenUnavailableError, UnexpectedStatusError
from tagcheck.models import ManifestStatus, RegistryConfig, RegistryCredentials
from tagcheck.utils.env import encode_basic, encode_token

logger = logging.getLogger(__name__)

AUTH_API = "https://{registry}/v2/auth?service={registry}&scope=repository:{image}:pull"
MANIFEST_API = "https://{registry}/v2/{image}/manifests/{tag}"
MANIFEST_MEDIA_TYPES = ", ".join([
    "application/vnd.oci.image.index.v1+json",
    "application/vnd.oci.image.manifest.v1+json",
    "application/vnd.docker.distribution.manifest.list.v2+json",
    "application/vnd.docker.distribution.manifest.v2+json",
])
DEFAULT_TIMEOUT = 10
GHCR_REGISTRY_NAME = "GHCR_IO"


class RegistryClient:
    """Checks tag existence against a registry's v2 API.

    The manifest is first requested anonymously so public images resolve in a
    single round trip. When that does not give a definitive answer a bearer
    token is obtained from the injected credentials and the check is repeated.
    """

    def __init__(
        self,
        config: RegistryConfig,
        credentials: RegistryCredentials | None = None,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.config: RegistryConfig = config
        self.credentials: RegistryCredentials = credentials or RegistryCredentials()
        self.session: requests.Session = session or requests.Session()
        self.timeout: float = timeout

    @property
    def reference(self) -> str:
        return f"{self.config.registry_url}/{self.config.image_path}"

    def is_tag_exist(self, tag: str) -> bool:
        if not tag:
            raise ValueError("tag must not be empty")
        status = self.check_anonymously(tag)
        if status.is_definitive():
            return status is ManifestStatus.FOUND
        bearer_token = self.get_bearer_token()
        return self.check_manifest_for_tag(tag, bearer_token)

    def check_anonymously(self, tag: str) -> ManifestStatus:
        try:
            found = self.check_manifest_for_tag(tag)
        except (RegistryError, requests.RequestException) as e:
            # any failure here, transport errors included, falls through to the authenticated path
            logger.debug(f"Anonymous check of {self.reference}:{tag} failed, retrying with credentials: {e}")
            return ManifestStatus.NEEDS_AUTH
        return ManifestStatus.FOUND if found else ManifestStatus.NOT_FOUND

    def check_manifest_for_tag(self, tag: str, bearer_token: str | None = None) -> bool:
        endpoint = MANIFEST_API.format(registry=self.config.registry_url, image=self.config.image_path, tag=tag)
        headers = {"Accept": MANIFEST_MEDIA_TYPES}
        if bearer_token:
            headers["Authorization"] = f"Bearer {bearer_token}"
        response = self.session.head(endpoint, headers=headers, timeout=self.timeout, allow_redirects=True)
        if response.status_code == 200:
            return True
        if response.status_code == 404:
            return False
        raise UnexpectedStatusError(response.status_code, endpoint)

    def get_bearer_token(self) -> str:
        if self.credentials.token:
            return self.credentials.token
        try:
            bearer_token = self.get_bearer_token_from_auth_token()
        except Exception:
            # ghcr.io accepts the base64 encoded GITHUB_TOKEN as a bearer token
            if self.config.registry_name != GHCR_REGISTRY_NAME or not self.credentials.github_token:
                raise
            logger.info(f"Token exchange failed for {self.reference}, using GITHUB_TOKEN instead")
            bearer_token = encode_token(self.credentials.github_token)
        if not bearer_token:
            raise TokenUnavailableError(self.config.registry_name)
        return bearer_token

    def get_bearer_token_from_auth_token(self) -> str:
        return self.retrieve_bearer_token(self.get_auth_token())

    def get_auth_token(self) -> str:
        if self.credentials.auth:
            return self.credentials.auth
        if not (self.credentials.user and self.credentials.password):
            raise MissingCredentialsError(self.config.registry_name)
        return encode_basic(self.credentials.user, self.credentials.password)

    def retrieve_bearer_token(self, auth_token: str) -> str:
        endpoint = AUTH_API.format(registry=self.config.registry_url, image=self.config.image_path)
        response = self.session.get(endpoint, headers={"Authorization": f"Basic {auth_token}"}, timeout=self.timeout)
        if response.status_code != 200:
            raise UnexpectedStatusError(response.status_code, endpoint)
        body = response.json()
        if not isinstance(body, dict):
            raise ValueError(f"Malformed auth response from {endpoint}")
        return body.get("token") or ""
