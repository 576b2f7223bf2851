from __future__ import annotations

from famtree.config import DisplaySettings, load_config
from famtree.logging import get_logger


def test_missing_config_file_falls_back_to_defaults(tmp_path):
    cfg = load_config(tmp_path / "absent.yml")

    assert cfg.display_settings() == DisplaySettings()
    assert cfg.debug is False


def test_display_section_overrides_defaults(tmp_path):
    path = tmp_path / "famtree.yml"
    path.write_text(
        "debug: true\n"
        "display:\n"
        "  group_gap: 2\n"
        "  name_display_cap: 8\n",
        encoding="utf-8",
    )

    cfg = load_config(path)
    settings = cfg.display_settings()

    assert cfg.debug is True
    assert settings.group_gap == 2
    assert settings.name_display_cap == 8
    assert settings.min_block_width == 6


def test_get_logger_adds_module_log_file():
    log = get_logger("famtree.tests.config")

    assert log.name == "famtree.tests.config"
    assert log.propagate is True
    files = [getattr(h, "baseFilename", "") for h in log.handlers]
    assert any(f.endswith("famtree_tests_config.log") for f in files)
    assert get_logger("famtree.tests.config").handlers == log.handlers
