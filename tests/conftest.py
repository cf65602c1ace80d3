import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project config files and REQCACHE_* env vars out of tests."""
    monkeypatch.setattr(
        "reqcache.config.hierarchy._GLOBAL_CONFIG_PATH",
        tmp_path / "global" / "config.yaml",
    )
    for name in (
        "REQCACHE_PARAMS_OBJECT_OVERWRITES",
        "REQCACHE_UID_SEPARATOR",
        "REQCACHE_DEV_MODE",
        "REQCACHE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def posts():
    return [
        {"id": 1, "title": "First post"},
        {"id": 2, "title": "Second post"},
    ]


@pytest.fixture
def recording_fetch(posts):
    """Fetch callable that records every URL it is asked for."""

    class _Fetch:
        def __init__(self) -> None:
            self.calls: list[str] = []

        def __call__(self, url: str):
            self.calls.append(url)
            return posts

    return _Fetch()
