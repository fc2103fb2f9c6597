import unittest
import doctest
from configparser import ConfigParser
from math import floor

import channel
import config
import test_utils

from dsn.centering import construct as centering_construct
from dsn.centering import utils as centering_utils
from dsn.centering.errors import AlreadyActiveError
from dsn.centering.structure import CenteringConfig, MarginPair
from dsn.centering.utils import absolute_margins, desired_width, offset_and_scale, relative_margins

from centering import (
    CenteringController,
    INVALID_CONFIG,
    NO_ROOM,
    NOT_A_SINGLE_VIEWPORT,
    NOT_ACTIVE,
    TOO_SMALL_FOR_MAX_SIZE,
    TOO_SMALL_FOR_MIN_SIZE,
)
from commands import CenteringCommands
from config import ConfigStore
from test_utils import FakeHost


def load_tests(loader, tests, ignore):
    # Test the docstrings inside our actual codebase
    tests.addTests(doctest.DocTestSuite(channel))
    tests.addTests(doctest.DocTestSuite(config))
    tests.addTests(doctest.DocTestSuite(test_utils))
    tests.addTests(doctest.DocTestSuite(centering_utils))
    tests.addTests(doctest.DocTestSuite(centering_construct))

    # Some tests in the doctests style are too large to nicely fit into a docstring; better to keep them separate:
    tests.addTests(doctest.DocFileSuite("doctests/centering_controller.txt"))

    return tests


class GeometryTestCase(unittest.TestCase):

    def test_desired_width_is_max_size_whatever_the_scale(self):
        for viewport_width in range(100, 400, 7):
            for max_scale in (0.1, 0.5, 1.0):
                config = CenteringConfig(max_size=100, max_scale=max_scale)
                self.assertEqual(100, desired_width(viewport_width, config))

    def test_desired_width_scales_monotonically(self):
        config = CenteringConfig(max_size=0, max_scale=0.6)
        previous = 0
        for viewport_width in range(1, 400):
            width = desired_width(viewport_width, config)
            self.assertEqual(floor(0.6 * viewport_width), width)
            self.assertGreaterEqual(width, previous)
            previous = width

    def test_relative(self):
        self.assertEqual(MarginPair(10, 10), relative_margins(120, CenteringConfig(max_size=100)))

    def test_relative_with_offsets_and_factors(self):
        config = CenteringConfig(max_size=100, margin_left_offset=2, margin_right_factor=0.5)
        self.assertEqual(MarginPair(12, 5), relative_margins(120, config))

    def test_absolute(self):
        config = CenteringConfig(max_size=100)
        self.assertEqual(MarginPair(50, 0), absolute_margins(100, 200, 0, config))

    def test_absolute_in_the_middle_of_the_frame(self):
        # frame 300, viewport from 100 to 200: the margin of 100 is already covered on both sides
        config = CenteringConfig(max_size=100)
        self.assertEqual(MarginPair(1, 0), absolute_margins(100, 300, 100, config))

    def test_absolute_without_room(self):
        self.assertIsNone(absolute_margins(100, 100, 0, CenteringConfig(max_size=100)))

    def test_offset_and_scale_floors(self):
        self.assertEqual(MarginPair(-3, -4), offset_and_scale(-5, 0, 0.5, 2, 1.2))


class ControllerTestCase(unittest.TestCase):

    def setUp(self):
        self.host = FakeHost(frame_width=200)
        self.host.config_store.update(min_size=80, max_size=100)
        self.host.add_viewport('a', 120, margins=(1, 2))
        self.controller = CenteringController(self.host)

    def test_activate_applies_margins_exactly_once(self):
        self.controller.activate('a')
        self.assertEqual((10, 10), self.host.get_margins('a'))
        self.assertEqual(1, self.host.viewports['a'].margin_writes)

    def test_activate_when_ineligible_leaves_margins_untouched(self):
        self.host.viewports['a'].width = 60
        self.controller.activate('a')
        self.assertTrue(self.controller.is_active('a'))
        self.assertEqual((1, 2), self.host.get_margins('a'))
        self.assertEqual(0, self.host.viewports['a'].margin_writes)

    def test_activate_twice(self):
        self.controller.activate('a')
        with self.assertRaises(AlreadyActiveError):
            self.controller.activate('a')

        self.assertEqual(1, self.host.subscriber_count('a'))

        # the original snapshot survived the second activation
        self.controller.deactivate('a')
        self.assertEqual((1, 2), self.host.get_margins('a'))

    def test_repeated_layout_changes_do_not_drift(self):
        self.controller.activate('a')
        first = self.host.get_margins('a')
        for i in range(5):
            self.host.notify('a')
            self.assertEqual(first, self.host.get_margins('a'))

    def test_becoming_ineligible_restores_original_margins(self):
        self.controller.activate('a')
        self.host.resize('a', 60)
        self.assertEqual((1, 2), self.host.get_margins('a'))

    def test_max_size_gates_independently(self):
        self.host.config_store.update(min_size=50, max_size=100)
        self.host.viewports['a'].width = 90
        self.controller.activate('a')
        self.assertEqual(TOO_SMALL_FOR_MAX_SIZE, self.controller.manual_recenter('a'))
        self.assertEqual((1, 2), self.host.get_margins('a'))

    def test_misconfigured_min_larger_than_max(self):
        self.host.config_store.update(min_size=130, max_size=100)
        self.controller.activate('a')
        self.assertEqual(TOO_SMALL_FOR_MIN_SIZE, self.controller.ineligibility_reason('a'))

    def test_single_window_rule(self):
        self.host.add_viewport('b', 120, left_offset=120)
        self.assertFalse(self.controller.is_eligible('a'))
        self.assertFalse(self.controller.is_eligible('b'))

        self.controller.activate('a')
        self.assertEqual(NOT_A_SINGLE_VIEWPORT, self.controller.manual_recenter('a'))

        self.host.close('b')
        self.assertTrue(self.controller.is_eligible('a'))
        self.assertEqual((10, 10), self.host.get_margins('a'))

    def test_hidden_viewports_do_not_count(self):
        self.host.add_viewport('b', 120)
        self.controller.activate('a')
        self.host.set_visible('b', False)
        self.assertEqual((10, 10), self.host.get_margins('a'))

    def test_single_window_rule_can_be_turned_off(self):
        self.host.config_store.update(single_window_only=False)
        self.host.add_viewport('b', 120)
        self.assertTrue(self.controller.is_eligible('a'))

    def test_manual_recenter_when_too_small(self):
        self.host.viewports['a'].width = 60
        self.controller.activate('a')
        self.assertEqual(TOO_SMALL_FOR_MIN_SIZE, self.controller.manual_recenter('a'))
        self.assertEqual((1, 2), self.host.get_margins('a'))

    def test_manual_recenter_when_not_active(self):
        self.assertEqual(NOT_ACTIVE, self.controller.manual_recenter('a'))
        self.assertEqual(0, self.host.viewports['a'].margin_writes)

    def test_other_content_is_left_alone_until_forced(self):
        self.controller.activate('a')
        self.host.show('a', 'something else')
        self.host.resize('a', 140)
        self.assertEqual((10, 10), self.host.get_margins('a'))

        self.assertIsNone(self.controller.manual_recenter('a'))
        self.assertEqual((20, 20), self.host.get_margins('a'))

    def test_gone_viewport_does_not_block_the_others(self):
        self.host.config_store.update(single_window_only=False)
        self.host.add_viewport('b', 120)
        self.controller.activate('b')
        self.controller.activate('a')

        del self.host.viewports['b']
        self.host.resize('a', 140)

        self.assertFalse(self.controller.is_active('b'))
        self.assertTrue(self.controller.is_active('a'))
        self.assertEqual((20, 20), self.host.get_margins('a'))

    def test_deactivate_when_not_active(self):
        self.controller.deactivate('a')
        self.assertEqual(0, self.host.viewports['a'].margin_writes)

    def test_deactivate_gone_viewport(self):
        self.controller.activate('a')
        del self.host.viewports['a']
        self.controller.deactivate('a')
        self.assertEqual([], self.controller.active_viewports())

    def test_invalid_config_is_a_no_op(self):
        self.host.config_store.update(max_size=0, max_scale=0)
        self.controller.activate('a')
        self.assertEqual((1, 2), self.host.get_margins('a'))
        self.assertEqual(INVALID_CONFIG, self.controller.manual_recenter('a'))
        self.assertEqual((1, 2), self.host.get_margins('a'))

    def test_scaled_desired_width(self):
        self.host.config_store.update(max_size=0, max_scale=0.5)
        self.controller.activate('a')
        self.assertEqual((30, 30), self.host.get_margins('a'))

    def test_absolute(self):
        self.host.config_store.update(use_absolute_centering=True)
        self.host.viewports['a'].width = 100
        self.controller.activate('a')
        self.assertEqual((50, 0), self.host.get_margins('a'))

    def test_absolute_without_room(self):
        self.host.config_store.update(use_absolute_centering=True)
        self.host.frame_width = 100
        self.host.viewports['a'].width = 100
        self.controller.activate('a')
        self.assertEqual(NO_ROOM, self.controller.manual_recenter('a'))
        self.assertEqual((1, 2), self.host.get_margins('a'))

    def test_negative_margins_are_clamped(self):
        commands = CenteringCommands(self.controller)
        self.controller.activate('a')
        commands.set_margin_left('a', -20)
        self.host.notify('a')
        self.assertEqual((0, 10), self.host.get_margins('a'))

    def test_margin_factors(self):
        self.host.config_store.update(margin_left_factor=2.0)
        self.controller.activate('a')
        self.assertEqual((20, 10), self.host.get_margins('a'))


class CommandsTestCase(unittest.TestCase):

    def setUp(self):
        self.host = FakeHost(frame_width=200)
        self.host.config_store.update(min_size=80, max_size=100)
        self.host.add_viewport('a', 120, margins=(0, 0))
        self.controller = CenteringController(self.host)
        self.commands = CenteringCommands(self.controller)

    def test_toggle(self):
        self.assertTrue(self.commands.toggle('a'))
        self.assertEqual((10, 10), self.host.get_margins('a'))
        self.assertFalse(self.commands.toggle('a'))
        self.assertEqual((0, 0), self.host.get_margins('a'))

    def test_enable_twice(self):
        self.commands.enable('a')
        self.commands.enable('a')
        self.assertEqual(1, self.host.subscriber_count('a'))
        self.commands.disable('a')
        self.assertEqual(0, self.host.subscriber_count('a'))

    def test_recenter(self):
        self.commands.enable('a')
        self.host.viewports['a'].width = 140
        self.assertIsNone(self.commands.recenter('a'))
        self.assertEqual((20, 20), self.host.get_margins('a'))

    def test_margin_changes_take_effect_on_the_next_recenter(self):
        self.commands.enable('a')

        self.commands.inc_margin_left('a')
        self.assertEqual((10, 10), self.host.get_margins('a'))

        self.host.notify('a')
        self.assertEqual((11, 10), self.host.get_margins('a'))

        self.commands.dec_margin_right('a')  # already at its floor of 0
        self.commands.set_margin_right('a', -4)
        self.commands.recenter('a')
        self.assertEqual((11, 6), self.host.get_margins('a'))

    def test_decreasing_left_stops_at_one(self):
        self.commands.enable('a')
        for i in range(3):
            self.commands.dec_margin_left('a')
        self.commands.recenter('a')
        self.assertEqual((11, 10), self.host.get_margins('a'))

    def test_margin_step(self):
        self.host.config_store.update(margin_step=3)
        self.commands.enable('a')
        self.commands.inc_margin_right('a')
        self.commands.recenter('a')
        self.assertEqual((10, 13), self.host.get_margins('a'))

    def test_margin_commands_when_not_active(self):
        self.assertFalse(self.commands.inc_margin_left('a'))


class ConfigStoreTestCase(unittest.TestCase):

    def test_load(self):
        parser = ConfigParser()
        parser.read_string(
            "[centering]\n"
            "min_size = 60\n"
            "max_scale = 0.5\n"
            "single_window_only = no\n"
            "ignored_content_ids = *scratch*, notes.txt\n")

        store = ConfigStore()
        store.load(parser)
        loaded = store.get_config()

        self.assertEqual(60, loaded.min_size)
        self.assertEqual(0.5, loaded.max_scale)
        self.assertFalse(loaded.single_window_only)
        self.assertEqual(frozenset(['*scratch*', 'notes.txt']), loaded.ignored_content_ids)

        # untouched
        self.assertEqual(0, loaded.max_size)

    def test_load_without_section(self):
        store = ConfigStore()
        before = store.get_config()
        store.load(ConfigParser())
        self.assertIs(before, store.get_config())

    def test_invalid_values_are_ignored(self):
        parser = ConfigParser()
        parser.read_string("[centering]\nmin_size = lots\nmax_size = 90\n")

        store = ConfigStore()
        store.load(parser)
        self.assertEqual(80, store.get_config().min_size)
        self.assertEqual(90, store.get_config().max_size)

    def test_defaults_survive_a_round_trip(self):
        parser = ConfigParser()
        ConfigStore().set_defaults(parser)

        store = ConfigStore(CenteringConfig(min_size=1, single_window_only=False))
        store.load(parser)

        defaults = CenteringConfig()
        for name, _ in config.OPTIONS:
            self.assertEqual(getattr(defaults, name), getattr(store.get_config(), name), name)

    def test_unknown_option(self):
        with self.assertRaises(AttributeError):
            CenteringConfig().replace(min_width=3)


if __name__ == '__main__':
    unittest.main()
