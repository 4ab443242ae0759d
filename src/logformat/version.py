from importlib.metadata import PackageNotFoundError, version

try:
    version = version("LogFormat")
except PackageNotFoundError:
    version = "0.0.0"
