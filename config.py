"""
Defaults for repositioning, kept in Kivy's Config (section "reposition") so that they can be set in an app's ini file
like any other Kivy setting. Values passed to a RepositioningController explicitly take precedence.
"""

from kivy.config import Config

SECTION = 'reposition'

Config.setdefaults(SECTION, {
    # seconds of scroll-silence before a position is captured
    'debounce_duration': '0.3',

    # restore the seeded position after the first frame
    'trigger_initial_restore': '0',
})


def get_debounce_duration():
    return Config.getfloat(SECTION, 'debounce_duration')


def get_trigger_initial_restore():
    return Config.getboolean(SECTION, 'trigger_initial_restore')
