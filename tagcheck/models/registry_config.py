from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class RegistryConfig:
    registry_name: str  # env var prefix, e.g. GHCR_IO
    registry_url: str
    image_path: str
