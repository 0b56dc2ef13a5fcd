"""HTTP/1.x message model and parser: methods, status codes, headers, cookies, requests and responses."""

__version__ = "0.1.0"