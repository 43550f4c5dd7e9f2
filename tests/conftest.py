"""Shared pytest fixtures and configuration."""

import pytest

from youbora_options.options import ConfigurationOptions


@pytest.fixture
def base_options():
    """Options with a handful of values set, as an integrator would."""
    return ConfigurationOptions(
        account_code="acct1",
        content_title="Movie",
        content_bitrate=1_500_000,
        content_metadata={"director": "Jane Doe", "rating": {"age": 12}},
        parse_cdn_node_list=["Akamai", "Fastly"],
    )


@pytest.fixture
def write_options_file(tmp_path):
    """Write YAML text to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "options.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
