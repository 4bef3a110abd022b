"""Root pytest configuration."""
import json

import pytest


@pytest.fixture
def write_config(tmp_path):
    """Write a config file under tmp_path and return its path.

    Dicts are dumped as JSON; strings and bytes are written verbatim.
    """
    def _write(name, content):
        path = tmp_path / name
        if isinstance(content, dict):
            path.write_text(json.dumps(content), encoding="utf-8")
        elif isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
