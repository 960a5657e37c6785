import enum


class Platform(enum.Enum):
    """
    The platform on which a session should run. ``ANY`` means the
    remote end may pick whatever it has.
    """
    ANY = "ANY"
    WINDOWS = "WINDOWS"
    XP = "XP"
    VISTA = "VISTA"
    WIN8 = "WIN8"
    WIN10 = "WIN10"
    MAC = "MAC"
    LINUX = "LINUX"
    UNIX = "UNIX"
    ANDROID = "ANDROID"
    IOS = "IOS"

    def __str__(self):
        return self.value


class BrowserType(enum.Enum):
    FIREFOX = "firefox"
    CHROME = "chrome"
    EDGE = "MicrosoftEdge"
    IE = "internet explorer"
    HTMLUNIT = "htmlunit"
    ANDROID = "android"
    IPHONE = "iPhone"
    IPAD = "iPad"
    OPERA = "opera"
    OPERA_BLINK = "operablink"
    SAFARI = "safari"
    PHANTOMJS = "phantomjs"

    def __str__(self):
        return self.value
