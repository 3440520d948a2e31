import os
from ruamel.yaml import YAML
from tagcheck.models import ImageSpec, ImagesFile
from tagcheck.utils.yaml_loader import get_yaml_instance


class ImagesRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[ImageSpec]:
        if not os.path.isfile(self.file_path):
            return []
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f)
            try:
                parsed = ImagesFile(**data)
                return parsed.images
            except Exception as e:
                raise ValueError(f"Invalid images file structure: {e}") from e
