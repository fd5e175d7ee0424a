from pathlib import Path
import textwrap

import pytest
from typer.testing import CliRunner

from pagecraft.config import settings


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ("PAGECRAFT_OUTPUT_DIR", "PAGECRAFT_BASE_URL", "PAGECRAFT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings.get_settings.cache_clear()
    yield
    settings.get_settings.cache_clear()


@pytest.fixture
def sample_config(tmp_path: Path) -> dict:
    """
    Write a small site configuration for tests and return metadata.
    """
    output_dir = tmp_path / "site"
    config_text = textwrap.dedent(
        f"""
        output_dir = "{output_dir.as_posix()}"
        base_url = "https://example.com"
        max_workers = 2

        [metadata]
        site = "Acme"
        description = "Acme documentation"
        locale = "en-GB"

        [theme]
        breakpoints = {{ md = "50rem" }}

        [[route]]
        label = "Docs"
        path = "docs"

        [[route]]
        label = "Blog"
        path = "/blog/"

        [[route]]
        label = "GitHub"
        path = "https://github.com/acme"
        new_tab = true

        [[sitemap]]
        label = "Privacy"
        path = "privacy"

        [[robots]]
        user_agent = "*"
        disallow = ["/drafts"]
        """
    ).strip()
    path = tmp_path / "site.toml"
    path.write_text(config_text + "\n", encoding="utf-8")
    return {"path": path, "output_dir": output_dir}
