from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class RegistryCredentials:
    token: str | None = None
    auth: str | None = None
    user: str | None = None
    password: str | None = None
    github_token: str | None = None
