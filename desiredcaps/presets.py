"""
Capabilities for well-known browsers. The functions here do nothing
but build a fresh :class:`DesiredCapabilities`. The classmethods of
:class:`DesiredCapabilities` with the same names are the ones users
normally call.
"""
from .capabilities import DesiredCapabilities
from .enums import BrowserType, Platform
from . import capability_type


def android():
    return DesiredCapabilities.for_browser(BrowserType.ANDROID, "",
                                           Platform.ANDROID)


def chrome():
    return DesiredCapabilities.for_browser(BrowserType.CHROME, "",
                                           Platform.ANY)


def firefox():
    caps = DesiredCapabilities.for_browser(BrowserType.FIREFOX, "",
                                           Platform.ANY)
    caps.set_capability(capability_type.ACCEPT_INSECURE_CERTS, True)
    return caps


def html_unit():
    return DesiredCapabilities.for_browser(BrowserType.HTMLUNIT, "",
                                           Platform.ANY)


def edge():
    return DesiredCapabilities.for_browser(BrowserType.EDGE, "",
                                           Platform.WINDOWS)


def internet_explorer():
    caps = DesiredCapabilities.for_browser(BrowserType.IE, "",
                                           Platform.WINDOWS)
    caps.set_capability(capability_type.ENSURING_CLEAN_SESSION, True)
    return caps


def iphone():
    return DesiredCapabilities.for_browser(BrowserType.IPHONE, "",
                                           Platform.MAC)


def ipad():
    return DesiredCapabilities.for_browser(BrowserType.IPAD, "",
                                           Platform.MAC)


def opera():
    return DesiredCapabilities.for_browser(BrowserType.OPERA, "",
                                           Platform.ANY)


def opera_blink():
    return DesiredCapabilities.for_browser(BrowserType.OPERA_BLINK, "",
                                           Platform.ANY)


def safari():
    return DesiredCapabilities.for_browser(BrowserType.SAFARI, "",
                                           Platform.MAC)


def phantomjs():
    return DesiredCapabilities.for_browser(BrowserType.PHANTOMJS, "",
                                           Platform.ANY)
