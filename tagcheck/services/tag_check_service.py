import logging
from collections.abc import Mapping
from typing import override

import requests

from tagcheck.clients.registry_client import RegistryClient
from tagcheck.models import ImageSpec, RegistryConfig, RegistryCredentials, TagCheckResult
from tagcheck.services.service import Service
from tagcheck.utils.env import load_credentials, registry_env_name
from tagcheck.utils.logging import setup_logger


class TagCheckService(Service):
    def __init__(
        self,
        images: list[ImageSpec],
        session: requests.Session | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        self.images: list[ImageSpec] = images
        self.session: requests.Session = session or requests.Session()
        self.environ: Mapping[str, str] | None = environ
        self.results: list[TagCheckResult] = []
        self.logger: logging.Logger = setup_logger("TagCheckService")

    @override
    def run(self) -> None:
        self.results = []
        credentials: dict[str, RegistryCredentials] = {}
        for image in self.images:
            registry_name = registry_env_name(image.registry_url)
            if registry_name not in credentials:
                credentials[registry_name] = load_credentials(registry_name, self.environ)
            client = self.build_client(image, registry_name, credentials[registry_name])
            for tag in image.tags:
                self.results.append(self.check_tag(client, image, tag))

    def build_client(self, image: ImageSpec, registry_name: str, credentials: RegistryCredentials) -> RegistryClient:
        config = RegistryConfig(
            registry_name=registry_name,
            registry_url=image.registry_url,
            image_path=image.image_path,
        )
        return RegistryClient(config, credentials, session=self.session)

    def check_tag(self, client: RegistryClient, image: ImageSpec, tag: str) -> TagCheckResult:
        try:
            exists = client.is_tag_exist(tag)
        except Exception as e:
            self.logger.error(f"Failed to check {image.reference}:{tag}: {e}")
            return TagCheckResult(image=image.reference, tag=tag, error=str(e))
        if exists:
            self.logger.info(f"Found tag {tag} for image {image.reference}")
        else:
            self.logger.warning(f"Tag {tag} not found for image {image.reference}")
        return TagCheckResult(image=image.reference, tag=tag, exists=exists)

    def missing(self) -> list[TagCheckResult]:
        return [r for r in self.results if r.exists is False]

    def failed(self) -> list[TagCheckResult]:
        return [r for r in self.results if r.error is not None]
