from importlib.metadata import PackageNotFoundError, version

try:
    version = version("ScanIO")
except PackageNotFoundError:
    version = "0.0.0"
