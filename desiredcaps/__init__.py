# To re-export here.
from .capabilities import DesiredCapabilities, NormalizedCapabilities, ABSENT
from .enums import Platform, BrowserType
from .accessors import CapabilityAccessors
from .config import *
from .loader import *
