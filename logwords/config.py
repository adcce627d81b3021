import logging
from configparser import ConfigParser, Error as ConfigParserError

from . import DEFAULT_LOG_DIR

SECTION = "LOCAL PROPERTIES"

DEFAULT_TOPK = 10
DEFAULT_LOG_LEVEL = "INFO"


class Config(object):
    def __init__(self, config=None):
        self.top_k = DEFAULT_TOPK
        self.html = False
        self.log_dir = DEFAULT_LOG_DIR
        self.log_level = DEFAULT_LOG_LEVEL
        self.warnings = []
        if config is not None and config.has_section(SECTION):
            self._load(config[SECTION])

    def _load(self, section):
        try:
            self.top_k = section.getint("TOPK", fallback=DEFAULT_TOPK)
        except ValueError:
            self.warnings.append(f"Invalid TOPK {section.get('TOPK')!r}, using {DEFAULT_TOPK}.")
        try:
            self.html = section.getboolean("HTML", fallback=False)
        except ValueError:
            self.warnings.append(f"Invalid HTML {section.get('HTML')!r}, using no.")
        self.log_dir = section.get("LOGDIR", fallback=DEFAULT_LOG_DIR) or DEFAULT_LOG_DIR
        level = section.get("LOGLEVEL", fallback=DEFAULT_LOG_LEVEL).upper()
        if isinstance(logging.getLevelName(level), int):
            self.log_level = level
        else:
            self.warnings.append(f"Invalid LOGLEVEL {level!r}, using {DEFAULT_LOG_LEVEL}.")

    @property
    def level(self):
        return logging.getLevelName(self.log_level)


def load_config(config_file=None):
    cparser = ConfigParser()
    if not config_file:
        return Config(cparser)
    try:
        cparser.read(config_file)
    except ConfigParserError as e:
        config = Config()
        config.warnings.append(f"Could not parse {config_file}: {e}")
        return config
    return Config(cparser)
