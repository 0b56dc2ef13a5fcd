[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vnethttp"
version = "0.1.0"
description = "HTTP/1.x message model and strict parser: methods, status codes, headers, cookies, requests and responses"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "parser", "cookies", "headers", "request", "response"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vnethttp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
