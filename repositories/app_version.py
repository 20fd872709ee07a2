from models import AppVersion, Platform


class AppVersionRepository:
    def get(self, platform: Platform) -> AppVersion | None:
        raise NotImplementedError  # pragma: no cover

    def set_version(self, platform: Platform, version: str) -> AppVersion:
        raise NotImplementedError  # pragma: no cover
