import logging
import os
import sys

from .config import load_settings
from .dumper import dump
from .exceptions import ConfigError, FieldOverflow, WriteError
from .streams import Stream, Sink


logger = logging.getLogger(__name__)


def setup_logging(verbose, environ):
    logging.basicConfig(level=logging.DEBUG if verbose or 'DEBUG' in environ else logging.INFO)


def main(argv=None, environ=None) -> int:
    if environ is None:
        environ = os.environ

    try:
        settings = load_settings(argv, environ)
    except ConfigError as e:
        setup_logging(False, environ)
        logger.error('%s', e)
        return 1

    setup_logging(settings.verbose, environ)
    logger.debug('settings: %r', settings)

    try:
        source = Stream(settings.input_path if settings.input_path else sys.stdin.buffer)
    except OSError:
        logger.error('can\'t open file \'%s\'', settings.input_path)
        return 1

    try:
        destination = Sink(settings.output_path if settings.output_path else os.devnull)
    except OSError as e:
        source.close()
        logger.error('can\'t open output: %s', e)
        return 1

    try:
        sink = Sink(settings.dump_path if settings.dump_path else sys.stdout.buffer)
    except OSError as e:
        source.close()
        destination.close()
        logger.error('can\'t open output: %s', e)
        return 1

    try:
        count = dump(source, sink, destination=destination)
    except (WriteError, FieldOverflow) as e:
        logger.error('dump failed: %s', e)
        return 1
    finally:
        source.close()
        destination.close()
        sink.close()

    logger.debug('dumped %d bytes', count)

    return 0
