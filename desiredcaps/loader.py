import logging

from .capabilities import DesiredCapabilities

__all__ = ["ConfigLoader"]

logger = logging.getLogger(__name__)

class ConfigLoader(object):

    def __init__(self, config_path, options=None):
        """
        Reads a configuration file.

        :param config_path: The configuration file to use. Must be a valid
                            Python file which sets ``CONFIG`` to a
                            :class:`desiredcaps.Config`.
        :type config_path: :class:`str`
        :param options: A dictionary of key/value pairs with which the
                        global variable ``builder_args`` will be initialized
                        before the configuration is read.
        :raises ValueError: When the file does not set ``CONFIG``.
        """
        self.config_path = config_path

        self.local_conf = {
            'builder_args': options if options is not None else {}
        }
        with open(self.config_path) as f:
            source = f.read()
        exec(compile(source, self.config_path, 'exec'), self.local_conf)

        self.config = self.local_conf.get("CONFIG")
        if self.config is None:
            raise ValueError("{0} does not set CONFIG"
                             .format(self.config_path))

        logger.debug("loaded %s from %s", self.config, self.config_path)

    def __getattr__(self, name):
        # local_conf may not exist yet if __init__ failed early.
        local_conf = self.__dict__.get("local_conf", {})
        if name in local_conf:
            return local_conf[name]

        raise AttributeError("{!r} object has no attribute {!r}"
                             .format(self.__class__, name))

    def get_desired_capabilities(self, overrides=None):
        """
        Creates the capabilities of a session on the basis of the
        configuration file upon which this object was created.

        :param overrides: Capabilities that the caller desires to
            override. These have priority over those capabilities that
            are set by the configuration file.
        :type overrides: :class:`DesiredCapabilities` or a mapping.
        :returns: The capabilities.
        :rtype: :class:`DesiredCapabilities`
        """
        return self.config.make_desired_capabilities().merge(overrides)

    def get_selenium_capabilities(self, overrides=None):
        """
        Like :meth:`get_desired_capabilities` but returns a plain
        dictionary that can be given to Selenium as-is.
        """
        return self.get_desired_capabilities(overrides).to_dict()
