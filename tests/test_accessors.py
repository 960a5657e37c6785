from unittest import TestCase

from desiredcaps import CapabilityAccessors, DesiredCapabilities, Platform


class CapabilityAccessorsTestCase(TestCase):

    def test_creates_capabilities(self):
        acc = CapabilityAccessors()
        self.assertEqual(len(acc.capabilities), 0)
        self.assertIsNone(acc.browser_name)
        self.assertIsNone(acc.version)
        self.assertIsNone(acc.platform)

    def test_reads_and_writes_wrapped_capabilities(self):
        caps = DesiredCapabilities.firefox()
        acc = CapabilityAccessors(caps)
        self.assertEqual(acc.platform, Platform.ANY)

        acc.platform = Platform.LINUX
        acc.version = "102"
        acc.browser_name = "firefox"
        self.assertEqual(caps["platform"], Platform.LINUX)
        self.assertEqual(caps["version"], "102")
        self.assertEqual(caps["browserName"], "firefox")

    def test_javascript_enabled(self):
        acc = CapabilityAccessors()
        self.assertIs(acc.javascript_enabled, False)
        acc.javascript_enabled = True
        self.assertIs(acc.capabilities["javascriptEnabled"], True)
        self.assertIs(acc.javascript_enabled, True)

    def test_accept_insecure_certs_defaults_to_true(self):
        self.assertIs(CapabilityAccessors().accept_insecure_certs, True)

    def test_accept_insecure_certs_from_string(self):
        caps = DesiredCapabilities({"acceptInsecureCerts": "FALSE"})
        self.assertIs(CapabilityAccessors(caps).accept_insecure_certs, False)

        caps = DesiredCapabilities({"acceptInsecureCerts": "True"})
        self.assertIs(CapabilityAccessors(caps).accept_insecure_certs, True)

    def test_accept_insecure_certs_setter(self):
        acc = CapabilityAccessors()
        acc.accept_insecure_certs = False
        self.assertIs(acc.capabilities["acceptInsecureCerts"], False)
        self.assertIs(acc.accept_insecure_certs, False)

    def test_none_value_reads_as_none(self):
        acc = CapabilityAccessors(DesiredCapabilities({"version": None}))
        self.assertIsNone(acc.version)
