from importlib import metadata

try:
    SDK_VERSION = metadata.version("outbox-execute")
except metadata.PackageNotFoundError:
    # Running from a source checkout that was never installed
    SDK_VERSION = "unknown"
