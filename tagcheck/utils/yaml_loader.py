from ruamel.yaml import YAML

def get_yaml_instance() -> YAML:
    return YAML(typ="safe", pure=True)
