[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hellokit"
version = "0.1.0"
description = "A toolbox of small utilities: directory tailing with processing status, housing statistics scraping, protobuf wire encoding, a prefix trie, promises and more"
requires-python = ">=3.10"
keywords = [
    "tail",
    "log processing",
    "file watching",
    "protobuf",
    "varint",
    "trie",
    "promise",
    "scraping",
    "xml",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "watchdog",
    "beautifulsoup4",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hellokit-freader = "hellokit.cli:main"
hellokit-watch = "hellokit.watch:main"
hellokit-serf-handler = "hellokit.serf_handler:main"
hellokit-echo = "hellokit.echo:main"
hellokit-importscan = "hellokit.importscan:main"
hellokit-fangcrawl = "hellokit.fangcrawl:main"
hellokit-siteinfo = "hellokit.siteinfo:main"
hellokit-echo-http = "hellokit.echo_http:main"
hellokit-products = "hellokit.products:main"
hellokit-htmlquery = "hellokit.htmlquery:main"
hellokit-protowire = "hellokit.protowire:main"
hellokit-xmalloc = "hellokit.xmalloc:main"
hellokit-cedar = "hellokit.cedar:main"
hellokit-xmltokens = "hellokit.xmltokens:main"
hellokit-classroll = "hellokit.classroll:main"
hellokit-greet = "hellokit.greet:greet"
hellokit-hello = "hellokit.greet:hello"
hellokit-tasks = "hellokit.greet:tasks"
hellokit-proxy = "hellokit.greet:proxy"

[tool.hatch.build.targets.wheel]
packages = ["hellokit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
