import copy
import logging
import os
import yaml
from . errors import ConfigError

logger = logging.getLogger("lettershift")

DEFAULT_CONFIG = os.path.join('.', 'lettershift.yaml')

DEFAULTS = {
    'language': None,
    'caesar': { 'key': None },
    'vigenere': { 'key': None },
    'check': False,
}

def merge(base, override):
    result = copy.deepcopy(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge(result[k], v)
        else:
            result[k] = v
    return result

def load_config(path=None):
    """
    Reads the yaml configuration file and merges it over DEFAULTS.
    Without a path the defaults are returned as they are.
    """
    if path is None:
        return copy.deepcopy(DEFAULTS)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = yaml.load(f, Loader=yaml.Loader)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed configuration file {path}: {e}") from e
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file {path} should contain a mapping, found {type(config).__name__}")
    for section in ('caesar', 'vigenere'):
        if config.get(section) is not None and not isinstance(config[section], dict):
            raise ConfigError(f"Section '{section}' of {path} should be a mapping")
    language = config.get('language')
    if language is not None:
        if not isinstance(language, str):
            raise ConfigError(f"The language in {path} should be a string, found {type(language).__name__}")
        config['language'] = language.lower()
    key = (config.get('vigenere') or {}).get('key')
    if key is not None and not isinstance(key, str):
        raise ConfigError(f"The vigenere key in {path} should be a string, found {type(key).__name__}")
    logger.debug(f"Configuration read from {path}")
    return merge(DEFAULTS, { k: v for k, v in config.items() if v is not None })
