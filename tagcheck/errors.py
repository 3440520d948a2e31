class RegistryError(Exception):
    """Base class for errors raised while talking to a container registry."""


class UnexpectedStatusError(RegistryError):
    def __init__(self, status_code: int, endpoint: str):
        self.status_code: int = status_code
        self.endpoint: str = endpoint
        super().__init__(f"unexpected response code {status_code} from {endpoint}")


class MissingCredentialsError(RegistryError, EnvironmentError):
    def __init__(self, registry_name: str):
        self.registry_name: str = registry_name
        super().__init__(f"could not get credentials for {registry_name}")


class TokenUnavailableError(RegistryError):
    def __init__(self, registry_name: str):
        self.registry_name: str = registry_name
        super().__init__(f"could not get a bearer token for {registry_name}")
