import logging

from logwords.config import Config, load_config, DEFAULT_TOPK


def test_defaults_without_file():
    config = load_config()
    assert config.top_k == DEFAULT_TOPK
    assert config.html is False
    assert config.log_dir == "Logs"
    assert config.level == logging.INFO
    assert config.warnings == []


def test_reads_local_properties(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[LOCAL PROPERTIES]\nTOPK = 3\nHTML = yes\nLOGDIR = out\nLOGLEVEL = debug\n")
    config = load_config(str(path))
    assert config.top_k == 3
    assert config.html is True
    assert config.log_dir == "out"
    assert config.level == logging.DEBUG


def test_missing_file_uses_defaults(tmp_path):
    config = load_config(str(tmp_path / "nope.ini"))
    assert config.top_k == DEFAULT_TOPK


def test_bad_values_fall_back(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[LOCAL PROPERTIES]\nTOPK = many\nHTML = maybe\nLOGLEVEL = LOUD\n")
    config = load_config(str(path))
    assert config.top_k == DEFAULT_TOPK
    assert config.html is False
    assert config.log_level == "INFO"
    assert len(config.warnings) == 3


def test_unparsable_file(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("TOPK = 3\n")
    config = load_config(str(path))
    assert config.top_k == DEFAULT_TOPK
    assert len(config.warnings) == 1


def test_empty_config_object():
    assert Config().top_k == DEFAULT_TOPK
