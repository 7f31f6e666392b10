[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rjhash"
version = "0.1.0"
description = "Modified MD5, SHA-1, RIPEMD-128 and Tiger digests, CRC-16 and byte scrambling for the RJv3 802.1X authentication dialect"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "md5", "sha1", "ripemd128", "tiger", "crc16", "802.1x", "rjv3"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Networking",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["rjhash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
