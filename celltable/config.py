import toml
import appdirs
import os
from os import path


DEFAULT_CONFIG_FILE = path.join(appdirs.user_config_dir('celltable', roaming=True), 'config.toml')

DEFAULT_CONFIG = {
    'table': {
        'style': 'box',
        'color': True,
        'padding-left': 1,
        'padding-right': 1,
    }
}


def defaults():
    return {section: dict(values) for section, values in DEFAULT_CONFIG.items()}


def load(file_name: str):
    cfg = defaults()
    try:
        for section, values in toml.load(file_name).items():
            if isinstance(values, dict):
                cfg.setdefault(section, {}).update(values)
            elif section in DEFAULT_CONFIG:
                raise ValueError('Invalid config file {}: "{}" must be a table'.format(file_name, section))
            else:
                cfg[section] = values
    except toml.TomlDecodeError as e:
        raise ValueError('Invalid config file {}: {}'.format(file_name, e)) from e
    except FileNotFoundError:
        os.makedirs(path.dirname(path.abspath(file_name)), exist_ok=True)
        with open(file_name, 'w') as f:
            toml.dump(cfg, f)

    return cfg
