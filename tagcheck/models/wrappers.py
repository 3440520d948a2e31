from pydantic.dataclasses import dataclass

from tagcheck.models.image_spec import ImageSpec

@dataclass(frozen=True)
class ImagesFile:
    images: list[ImageSpec]
