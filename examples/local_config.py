from desiredcaps import Config, DesiredCapabilities

#
# This file gives you an overview of what a desiredcaps configuration
# file can contain. It is plain Python. ``builder_args`` holds the
# options passed to ``ConfigLoader``.
#

caps = DesiredCapabilities({
    "acceptInsecureCerts": "true",
})

if builder_args.get("headless"):
    caps.set_capability("moz:firefoxOptions", {"args": ["-headless"]})

# This config would execute on a remote service because it is remote.
CONFIG = Config("Windows 10", "FF", "102", caps, remote=True)

# Any other global is available as an attribute of the loader.
SERVICE_LOG_PATH = "/tmp/log"
