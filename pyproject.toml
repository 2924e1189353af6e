[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terradocs"
version = "0.1.0"
description = "Building blocks for documenting infrastructure modules: print settings, comment extraction, section templating and Markdown/AsciiDoc sanitizing"
requires-python = ">=3.10"
dependencies = []
keywords = ["documentation", "markdown", "asciidoc", "terraform", "sanitize", "anchors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["terradocs"]

[tool.pytest.ini_options]
addopts = "-ra"
