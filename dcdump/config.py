"""
Settings of the dcdump program.

Each setting can come from (in order of precedence)

 1. the command line
 2. an environment variable prefixed with DC_DUMP_
 3. the [dcdump] section of the configuration file (~/.dcdump.conf by default)
 4. its default value
"""
import argparse
import configparser
import logging
import os
from typing import Dict

from .exceptions import ConfigError


logger = logging.getLogger(__name__)

ENV_PREFIX = 'DC_DUMP_'
DEFAULT_CONFIG_PATH = '~/.dcdump.conf'
CONFIG_SECTION = 'dcdump'

TRUE_VALUES = ('1', 'true', 'yes', 'on')
FALSE_VALUES = ('0', 'false', 'no', 'off')

# attribute name -> key used for environment variables and configuration file
KEYS = {
    'verbose': 'verbose',
    'input_path': 'in',
    'output_path': 'out',
    'dump_path': 'dump',
}


class Settings(object):

    def __init__(self, config_path=None, verbose=False, input_path=None, output_path=None, dump_path=None):
        self.config_path = config_path
        self.verbose = verbose
        self.input_path = input_path
        self.output_path = output_path
        self.dump_path = dump_path

    def __repr__(self):
        return '<%s(%s)>' % (
            self.__class__.__name__,
            ','.join('%s=%r' % (k, v) for k, v in self.__dict__.items()))

    def __eq__(self, other):
        return isinstance(other, Settings) and self.__dict__ == other.__dict__


def parse_bool(value: str) -> bool:
    normalized = value.strip().lower()

    if normalized in TRUE_VALUES:
        return True

    if normalized in FALSE_VALUES:
        return False

    raise ConfigError(f'\'{value}\' is not a boolean value')


def _convert(name: str, value: str):
    if name == 'verbose':
        return parse_bool(value)

    return os.path.expanduser(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dcdump',
        description='Describe each byte of the input: offset, line, column and its binary, '
                    'octal, decimal, hexadecimal and printable representation')
    parser.add_argument('-c', '--config', dest='config_path', metavar='CONFIG', default=None,
                        help=f'configuration file (default: {DEFAULT_CONFIG_PATH})')
    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true', default=None,
                        help='log what is happening')
    parser.add_argument('-i', '--in', dest='input_path', metavar='IN', default=None,
                        help='file to dump (default: standard input)')
    parser.add_argument('-o', '--out', dest='output_path', metavar='OUT', default=None,
                        help='where to copy the input (default: discarded)')
    parser.add_argument('-d', '--dump', dest='dump_path', metavar='DUMP', default=None,
                        help='where to write the dump (default: standard output)')

    return parser


def read_env(environ) -> Dict[str, object]:
    values = {}
    for name, key in KEYS.items():
        env_name = ENV_PREFIX + key.upper()
        if env_name in environ:
            values[name] = _convert(name, environ[env_name])

    return values


def read_config(path: str, required: bool = False) -> Dict[str, object]:
    path = os.path.expanduser(path)

    # values are literal paths, % has no special meaning
    parser = configparser.ConfigParser(interpolation=None)
    try:
        with open(path, 'r') as f:
            parser.read_file(f)
    except FileNotFoundError:
        if required:
            raise ConfigError(f'configuration file \'{path}\' not found')
        logger.debug('no configuration file at \'%s\'', path)
        return {}
    except (OSError, configparser.Error) as e:
        raise ConfigError(f'unable to read configuration file \'{path}\': {e}') from e

    if not parser.has_section(CONFIG_SECTION):
        return {}

    section = parser[CONFIG_SECTION]
    reverse = {key: name for name, key in KEYS.items()}

    values = {}
    for key, value in section.items():
        if key not in reverse:
            logger.warning('unknown key \'%s\' in \'%s\'', key, path)
            continue
        values[reverse[key]] = _convert(reverse[key], value)

    return values


def load_settings(argv=None, environ=None) -> Settings:
    if environ is None:
        environ = os.environ

    args = build_parser().parse_args(argv)

    required = args.config_path is not None
    config_path = args.config_path if required else DEFAULT_CONFIG_PATH

    values = read_config(config_path, required=required)
    values.update(read_env(environ))
    values.update({name: getattr(args, name) for name in KEYS if getattr(args, name) is not None})

    return Settings(config_path=os.path.expanduser(config_path), **values)
