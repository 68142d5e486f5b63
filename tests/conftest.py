"""Shared fixtures: an offline build configuration rooted in tmp_path."""

import pytest

from sources import BuildConfig


def write_lines(path, lines):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def offline_config(tmp_path):
    return BuildConfig(
        hosts=(),
        domain_lists=(),
        adguard_filters=(),
        whitelist_filters=(),
        phishing_feeds=(),
        predefined_whitelist=(),
        local_domainset_path=str(tmp_path / "Source" / "domainset" / "reject_local.conf"),
        rule_conf_path=str(tmp_path / "Source" / "non_ip" / "reject.conf"),
        output_dir=str(tmp_path / "out"),
        max_workers=4,
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("REJECT_OUTPUT_DIR", "REJECT_DEBUG_DOMAIN", "REJECT_REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
