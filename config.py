"""
The live centering configuration.

In the GUI the configuration is read from the `[centering]` section of kivy's Config (which is a ConfigParser), e.g.:

    [centering]
    min_size = 80
    max_size = 100
    single_window_only = 1
    ignored_content_ids = *scratch*, *messages*

Nothing is ever written back; the configuration lives as long as the process does.
"""
import logging

from dsn.centering.structure import CenteringConfig

logger = logging.getLogger(__name__)

SECTION = 'centering'

# option name => the ConfigParser getter to read it with
OPTIONS = [
    ('min_size', 'getint'),
    ('max_size', 'getint'),
    ('max_scale', 'getfloat'),
    ('single_window_only', 'getboolean'),
    ('use_absolute_centering', 'getboolean'),
    ('ignored_content_ids', 'get'),
    ('margin_left_offset', 'getint'),
    ('margin_right_offset', 'getint'),
    ('margin_left_factor', 'getfloat'),
    ('margin_right_factor', 'getfloat'),
    ('margin_step', 'getint'),
]


def parse_content_ids(value):
    """
    >>> sorted(parse_content_ids(" *scratch*, notes.txt,,"))
    ['*scratch*', 'notes.txt']
    """
    return frozenset(part.strip() for part in value.split(',') if part.strip())


def format_option(name, value):
    if name == 'ignored_content_ids':
        return ', '.join(sorted(value))
    if isinstance(value, bool):
        return '1' if value else '0'
    return str(value)


class ConfigStore(object):
    """Holds the current CenteringConfig. Hosts hand `get_config` to the controller; since the store replaces (rather
    than mutates) its config on every update, whatever the controller reads is consistent."""

    def __init__(self, config=None):
        self.config = config if config is not None else CenteringConfig()

    def get_config(self):
        return self.config

    def update(self, **kwargs):
        self.config = self.config.replace(**kwargs)
        logger.debug("Centering configuration updated: %s", self.config)
        return self.config

    def load(self, parser, section=SECTION):
        """Reads the known options from `section` of a ConfigParser-like object; options that are not present keep
        their current values."""
        if not parser.has_section(section):
            logger.debug("No [%s] section; keeping the current centering configuration", section)
            return self.config

        changes = {}
        for name, getter in OPTIONS:
            if not parser.has_option(section, name):
                continue

            try:
                value = getattr(parser, getter)(section, name)
            except ValueError as e:
                logger.warning("Ignoring invalid value for [%s] %s: %s", section, name, e)
                continue

            if name == 'ignored_content_ids':
                value = parse_content_ids(value)

            changes[name] = value

        return self.update(**changes)

    def set_defaults(self, parser, section=SECTION):
        """Makes sure `section` exists in `parser`, and that each option has a value (the current one)."""
        if not parser.has_section(section):
            parser.add_section(section)

        for name, _ in OPTIONS:
            if not parser.has_option(section, name):
                parser.set(section, name, format_option(name, getattr(self.config, name)))
