from mdview.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.render.dark_mode is False
    assert cfg.render.font_size == 14
    assert cfg.export.mode == "auto"
    assert cfg.export.wrap_width == 80
    assert cfg.export.fallback_chars == 1000
    assert cfg.page.width == 595
    assert cfg.page.height == 842
    assert cfg.page.margin == 50
    assert cfg.page.line_height == 20
    assert cfg.page.font_size == 12
    assert cfg.page.font_name == "Helvetica"
    assert cfg.recent.max_entries == 5
    assert cfg.storage.path is None
    assert cfg.storage.path_env == "MDVIEW_STATE"
