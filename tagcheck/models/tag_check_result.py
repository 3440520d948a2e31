from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class TagCheckResult:
    image: str
    tag: str
    exists: bool | None = None
    error: str | None = None  # set when the registry could not answer
