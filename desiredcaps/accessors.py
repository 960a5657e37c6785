from .capabilities import DesiredCapabilities, ABSENT
from . import capability_type


class CapabilityAccessors(object):

    def __init__(self, caps=None):
        """
        Named accessors over a :class:`DesiredCapabilities`. Reading and
        writing through the properties of this object reads and writes
        the wrapped capabilities.

        :param caps: The capabilities to wrap. A new empty instance is
                     created if omitted.
        :type caps: :class:`DesiredCapabilities`
        """
        self.capabilities = caps if caps is not None else \
            DesiredCapabilities()

    def _get(self, name):
        value = self.capabilities.get_capability(name)
        return None if value is ABSENT else value

    @property
    def browser_name(self):
        return self._get(capability_type.BROWSER_NAME)

    @browser_name.setter
    def browser_name(self, value):
        self.capabilities.set_capability(capability_type.BROWSER_NAME, value)

    @property
    def version(self):
        return self._get(capability_type.VERSION)

    @version.setter
    def version(self, value):
        self.capabilities.set_capability(capability_type.VERSION, value)

    @property
    def platform(self):
        return self._get(capability_type.PLATFORM)

    @platform.setter
    def platform(self, value):
        self.capabilities.set_capability(capability_type.PLATFORM, value)

    @property
    def javascript_enabled(self):
        return self.capabilities.coerced_boolean(
            capability_type.SUPPORTS_JAVASCRIPT, False)

    @javascript_enabled.setter
    def javascript_enabled(self, value):
        self.capabilities.set_capability(capability_type.SUPPORTS_JAVASCRIPT,
                                         bool(value))

    @property
    def accept_insecure_certs(self):
        """
        ``True`` unless the capabilities say otherwise. Remote ends
        accept insecure certificates when the capability is missing.
        """
        return self.capabilities.coerced_boolean(
            capability_type.ACCEPT_INSECURE_CERTS, True)

    @accept_insecure_certs.setter
    def accept_insecure_certs(self, value):
        self.capabilities.set_capability(
            capability_type.ACCEPT_INSECURE_CERTS, bool(value))
