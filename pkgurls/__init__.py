# pkgurls/__init__.py
__pkg_version__ = "0.1.0"
__pypi_url__ = "https://pypi.org/pypi/pkgurls/json"
