from enum import Enum


class ManifestStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    NEEDS_AUTH = "needs_auth"

    def is_definitive(self) -> bool:
        return self is not ManifestStatus.NEEDS_AUTH
