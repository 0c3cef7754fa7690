"""Helpers for reading durations and parser settings from TOML config.

A typical config file:

    interval = "1 hr 30 min"

    [durstr]
    ignore_case = true
"""


import toml
from durstr.errors import ConfigError
from durstr.parser import Parser
from durstr.parser import ParserOptions


def options_from_config(cfg):
    """Returns ParserOptions built from a config table (a dict), or the
    defaults if cfg is None.

    Raises ConfigError if the table contains unknown keys or bad values.
    """
    if cfg is None:
        return ParserOptions()
    if not isinstance(cfg, dict):
        raise ConfigError(f'parser options must be a table, not {cfg!r}')
    return ParserOptions.from_mapping(cfg)


def loads_options(text, table='durstr'):
    """Parses TOML text and returns the ParserOptions in the given table."""
    try:
        cfg = toml.loads(text)
    except toml.TomlDecodeError as e:
        raise ConfigError(f'invalid TOML: {e}') from e
    return options_from_config(cfg.get(table))


def config_duration(cfg, key, default=None, options=None):
    """Returns the timedelta for a duration string stored in cfg[key].

    options is passed to Parser, so it may be a ParserOptions, a dict or
    None. If the key is absent, default is returned unchanged. Raises
    ConfigError if the value is not a string, and a DurationError if the
    string can't be parsed.
    """
    value = cfg.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigError(f'{key} must be a duration string, not {value!r}')
    return Parser(options).parse(value)
