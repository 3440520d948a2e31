from .image_spec import ImageSpec
from .manifest_status import ManifestStatus
from .registry_config import RegistryConfig
from .registry_credentials import RegistryCredentials
from .tag_check_result import TagCheckResult
from .wrappers import ImagesFile

__all__ = [
    "ImageSpec",
    "ManifestStatus",
    "RegistryConfig",
    "RegistryCredentials",
    "TagCheckResult",
    "ImagesFile",
]
