"""
Names of the capabilities that Selenium servers and drivers commonly
understand. The capability dictionary treats these like any other name;
they exist so that callers do not have to repeat string literals.
"""

BROWSER_NAME = "browserName"
VERSION = "version"
PLATFORM = "platform"
SUPPORTS_JAVASCRIPT = "javascriptEnabled"
TAKES_SCREENSHOT = "takesScreenshot"
ACCEPT_SSL_CERTS = "acceptSslCerts"
ACCEPT_INSECURE_CERTS = "acceptInsecureCerts"

# W3C names. Edge and geckodriver report these instead of the legacy
# ``version`` and ``platform``.
BROWSER_VERSION = "browserVersion"
PLATFORM_NAME = "platformName"

PAGE_LOAD_STRATEGY = "pageLoadStrategy"
UNEXPECTED_ALERT_BEHAVIOUR = "unexpectedAlertBehaviour"
PROXY = "proxy"

# Only meaningful to a Selenium server.
ENSURING_CLEAN_SESSION = "ensureCleanSession"
