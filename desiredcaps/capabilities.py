"""
The capability dictionary sent when requesting a Selenium session.
"""
import collections.abc
import enum
import logging
import warnings

from . import capability_type

logger = logging.getLogger(__name__)


class _Absent(object):

    def __repr__(self):
        return "ABSENT"

    def __bool__(self):
        return False

ABSENT = _Absent()
"""
Returned by :meth:`DesiredCapabilities.get_capability` for names that
were never set. A name set to ``None`` returns ``None``.
"""


class DesiredCapabilities(collections.abc.Mapping):

    def __init__(self, raw=None):
        """
        The capabilities requested for a session, in the order in which
        they were first set.

        Instances are read like any other mapping but they are modified
        only through :meth:`set_capability` and :meth:`merge`. Setting a
        name that is already present replaces its value and keeps its
        position in the iteration order.

        :param raw: A mapping whose entries are copied verbatim, in its
                    iteration order. ``None`` gives an empty instance.
        :type raw: :class:`collections.abc.Mapping`
        """
        self._caps = {}

        if raw is None:
            return

        for name, value in raw.items():
            self.set_capability(name, value)

    @classmethod
    def for_browser(cls, browser, version, platform):
        """
        :param browser: The browser name. A :class:`BrowserType` or a string.
        :param version: The browser version. ``""`` means any version.
        :param platform: A :class:`Platform` or a string.
        :returns: Capabilities holding exactly ``browserName``,
                  ``version`` and ``platform``.
        """
        ret = cls()
        ret.set_capability(capability_type.BROWSER_NAME, browser)
        ret.set_capability(capability_type.VERSION, version)
        ret.set_capability(capability_type.PLATFORM, platform)
        return ret

    @classmethod
    def merged(cls, *others):
        """
        Merge all the arguments, in order, into a new instance. When a
        name appears in more than one argument, the last one wins.
        """
        ret = cls()
        for other in others:
            ret.merge(other)
        return ret

    def __getitem__(self, name):
        return self._caps[name]

    def __iter__(self):
        return iter(self._caps)

    def __len__(self):
        return len(self._caps)

    def __repr__(self):
        return "{0}({1!r})".format(self.__class__.__name__, self._caps)

    def get_capability(self, name):
        """
        :returns: The value of ``name`` or :data:`ABSENT` if it was
                  never set.
        """
        return self._caps.get(name, ABSENT)

    def set_capability(self, name, value):
        if not isinstance(name, str):
            raise TypeError("capability names must be strings, not {0!r}"
                            .format(name))

        if not name:
            raise ValueError("capability names cannot be empty")

        self._caps[name] = value

    def merge(self, other):
        """
        Merges ``other`` into this instance. Values from ``other``
        replace the values of names already present here. Names present
        in only one of the two are kept.

        Merging is not commutative. Merge defaults first and overrides
        after.

        :param other: The capabilities to merge. ``None`` is a no-op.
        :type other: :class:`DesiredCapabilities` or any mapping.
        :returns: This instance, so that calls can be chained.
        """
        if other is None:
            return self

        for name, value in other.items():
            self.set_capability(name, value)

        return self

    def coerced_boolean(self, name, default):
        """
        Reads ``name`` as a boolean. Capabilities that come from
        configuration files or old clients may hold ``"true"`` rather
        than ``True``.

        A string is ``True`` only if it is ``"true"`` in any case. Any
        other string, including ``"yes"`` or ``"1"``, is ``False``.

        :param name: The capability to read.
        :param default: What to return if ``name`` is not set or holds
                        something that is neither a boolean nor a string.
        :rtype: :class:`bool`
        """
        value = self._caps.get(name)

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.lower() == "true"

        return default

    def copy(self):
        return self.__class__(self._caps)

    def to_dict(self):
        """
        :returns: A plain dictionary suitable for passing to Selenium.
                  Platforms and browser types are replaced by their
                  string values. Nested mappings are converted too.
        """
        return {name: _serialize(value) for name, value in self._caps.items()}

    #
    # Presets. These wrap the functions of :mod:`desiredcaps.presets`
    # and let users know when a browser-specific options class would
    # be better. They always return a DesiredCapabilities, even when
    # called on a subclass. presets is imported in each method because
    # it imports this module.
    #

    @classmethod
    def android(cls):
        from .presets import android
        return _preset(android)

    @classmethod
    def chrome(cls):
        from .presets import chrome
        return _preset(chrome, preferred="ChromeOptions")

    @classmethod
    def firefox(cls):
        from .presets import firefox
        return _preset(firefox, preferred="FirefoxOptions")

    @classmethod
    def html_unit(cls):
        from .presets import html_unit
        return _preset(html_unit)

    @classmethod
    def edge(cls):
        from .presets import edge
        return _preset(edge, preferred="EdgeOptions")

    @classmethod
    def internet_explorer(cls):
        from .presets import internet_explorer
        return _preset(internet_explorer)

    @classmethod
    def iphone(cls):
        from .presets import iphone
        return _preset(iphone)

    @classmethod
    def ipad(cls):
        from .presets import ipad
        return _preset(ipad)

    @classmethod
    def opera(cls):
        from .presets import opera
        return _preset(opera, deprecated="use DesiredCapabilities.opera_blink")

    @classmethod
    def opera_blink(cls):
        from .presets import opera_blink
        return _preset(opera_blink, preferred="OperaOptions")

    @classmethod
    def safari(cls):
        from .presets import safari
        return _preset(safari, preferred="SafariOptions")

    @classmethod
    def phantomjs(cls):
        from .presets import phantomjs
        return _preset(phantomjs,
                       deprecated="PhantomJS is no longer actively developed")


def _preset(factory, preferred=None, deprecated=None):
    name = factory.__name__

    if preferred is not None:
        logger.info("Using `%s()` is preferred to `DesiredCapabilities.%s()`",
                    preferred, name)

    if deprecated is not None:
        warnings.warn("DesiredCapabilities.{0}() is deprecated: {1}"
                      .format(name, deprecated),
                      DeprecationWarning, stacklevel=3)

    return factory()


def _serialize(value):
    if isinstance(value, enum.Enum):
        return value.value

    if isinstance(value, collections.abc.Mapping):
        return {k: _serialize(v) for k, v in value.items()}

    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]

    return value


class NormalizedCapabilities(dict):

    def __init__(self, caps):
        """
        Drivers do not all report the same names. Edge and geckodriver
        store the browser version under ``browserVersion`` instead of
        ``version`` and the platform under ``platformName`` instead of
        ``platform``.

        Instances of this class present a normalized view of the
        capabilities reported by a driver. Instances should be treated
        as read-only. They contain the same fields as the capabilities
        passed in the constructor, with the following differences:

        * ``version`` is renamed ``browserVersion``

        * ``platform`` is renamed ``platformName``

        We normalize to the W3C names because they are more precise.
        Going the other way could cause name clashes in the future.

        This class is meant for capabilities **read** from a driver.
        Use :class:`DesiredCapabilities` for capabilities passed to
        create a session.

        :param caps: The original capabilities. Either a plain mapping
                     or a :class:`DesiredCapabilities`.
        """
        # Keep a copy for debugging purposes.
        self.caps = caps

        newcaps = caps.to_dict() if isinstance(caps, DesiredCapabilities) \
            else dict(caps)
        if capability_type.PLATFORM_NAME not in newcaps:
            for old, new in ((capability_type.PLATFORM,
                              capability_type.PLATFORM_NAME),
                             (capability_type.VERSION,
                              capability_type.BROWSER_VERSION)):
                if old in newcaps:
                    newcaps[new] = newcaps.pop(old)

        super(NormalizedCapabilities, self).__init__(newcaps)
