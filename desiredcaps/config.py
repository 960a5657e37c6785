from selenium import webdriver
import collections

from .capabilities import DesiredCapabilities
from .enums import BrowserType, Platform
from . import capability_type

__all__ = ["ConfigTuple", "Config", "get_config", "forget"]

ConfigTuple = collections.namedtuple(
    'ConfigTuple',
    ('platform', 'browser', 'version'))

configs = collections.OrderedDict()
_configs_by_platform = {}
_configs_by_browser = {}
_configs_by_version = {}

_BROWSER_ABBRS = {
    "IE": "INTERNETEXPLORER",
    "FF": "FIREFOX",
    "CH": "CHROME",
    "ED": "EDGE",
}

# Browser types whose member name differs from the attribute name of
# selenium.webdriver.DesiredCapabilities.
_BROWSER_TYPE_NAMES = {
    BrowserType.IE: "INTERNETEXPLORER",
}

def _normalize(platform, browser):
    if isinstance(browser, BrowserType):
        browser = _BROWSER_TYPE_NAMES.get(browser, browser.name)

    if isinstance(platform, Platform):
        platform = platform.name

    browser = browser.upper() if browser is not None else None
    platform = platform.upper() if platform is not None else None

    # Resolve abbreviation if it exists...
    browser = _BROWSER_ABBRS.get(browser, browser) \
        if browser is not None else None

    return platform, browser


def get_config(platform=None, browser=None, version=None):
    """
    Finds a configuration previously created with :class:`Config`.

    When all three parameters are given, the configuration must exist
    or :class:`KeyError` is raised. Otherwise, the parameters given
    must match exactly one configuration.

    :raises ValueError: When no configuration or more than one
                        configuration matches.
    """
    platform, browser = _normalize(platform, browser)

    if platform is not None and browser is not None and version is not None:
        return configs[ConfigTuple(platform, browser, version)]

    ret = None
    if browser is not None:
        if browser not in _configs_by_browser:
            raise ValueError("no configuration for browser: " + browser)
        ret = _configs_by_browser[browser]

    if version is not None:
        if version not in _configs_by_version:
            raise ValueError("no configuration for version: " + version)
        by_version = _configs_by_version[version]
        ret = by_version if ret is None else ret & by_version

    if platform is not None:
        if platform not in _configs_by_platform:
            raise ValueError("no configuration for platform: " + platform)
        by_platform = _configs_by_platform[platform]
        ret = by_platform if ret is None else ret & by_platform

    if not ret:
        raise ValueError("no configuration for the combination: {0}, {1}, {2}"
                         .format(platform, browser, version))
    elif len(ret) > 1:
        raise ValueError("the combination {0}, {1}, {2} is ambiguous"
                         .format(platform, browser, version))

    return next(iter(ret))


def forget():
    # pylint: disable=global-statement
    global configs, _configs_by_platform, _configs_by_browser, \
        _configs_by_version
    configs = collections.OrderedDict()
    _configs_by_platform = {}
    _configs_by_browser = {}
    _configs_by_version = {}


class Config(object):

    def __init__(self, platform, browser, version, desired_capabilities=None,
                 remote=False):
        """
        Records the platform, browser and version on which a test
        suite should run. Creating a ``Config`` registers it so that
        :func:`get_config` can find it. A later ``Config`` with the
        same platform, browser and version replaces the earlier one.

        :param desired_capabilities: Additional capabilities. These
            override the defaults Selenium has for the browser.
        :type desired_capabilities: :class:`DesiredCapabilities` or a
                                    mapping.
        :param remote: Whether the browser runs on a remote service.
        """
        platform, browser = _normalize(platform, browser)

        self.platform = platform
        self.browser = browser
        self.version = version
        self.remote = remote
        self.desired_capabilities = DesiredCapabilities(desired_capabilities)

        key = ConfigTuple(platform, browser, version)
        old = configs.get(key, None)
        configs[key] = self

        ps = _configs_by_platform.setdefault(platform, set())
        bs = _configs_by_browser.setdefault(browser, set())
        vs = _configs_by_version.setdefault(version, set())

        if old:
            ps.discard(old)
            bs.discard(old)
            vs.discard(old)

        ps.add(self)
        bs.add(self)
        vs.add(self)

    def make_desired_capabilities(self):
        """
        :returns: Selenium's defaults for the browser, overridden by the
                  capabilities of this configuration, with ``platform``
                  and ``version`` set from this configuration. The
                  platform is stored as a :class:`Platform` when it names
                  one, as the presets do, and as a string otherwise.
        :rtype: :class:`DesiredCapabilities`
        """
        defaults = getattr(webdriver.DesiredCapabilities, self.browser, None) \
            if self.browser is not None else None
        ret = DesiredCapabilities.merged(defaults, self.desired_capabilities)
        ret.set_capability(capability_type.PLATFORM,
                           Platform.__members__.get(self.platform,
                                                    self.platform))
        ret.set_capability(capability_type.VERSION, self.version)
        return ret

    def __str__(self):
        return "Desired capabilities configured for {0}, {1}, {2}, {3}" \
            .format(self.platform, self.browser, self.version,
                    "Remote" if self.remote else "Local")
