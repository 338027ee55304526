import pytest

from confmgr.config import ConfigMgr


SAMPLE_CONFIG = """# comment
[Section]
Port = 8085
Name = "MyServer"   # trailing comment
Port = 9000
"""


@pytest.fixture
def write_config(tmp_path):
    """Return a helper that writes a config file under tmp_path and returns its path."""

    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def sample_config(write_config):
    return write_config("worldserver.conf", SAMPLE_CONFIG)


@pytest.fixture
def config_mgr():
    return ConfigMgr()
