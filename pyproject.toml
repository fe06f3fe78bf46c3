[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iotcipher"
version = "0.1.0"
description = "Experimental sponge-based ciphers and a hash for IoT comparisons, with MQTT publish and subscribe tools"
requires-python = ">=3.10"
keywords = [
    "lightweight cryptography",
    "aead",
    "sponge",
    "spongent",
    "photon-beetle",
    "quark",
    "mqtt",
    "iot",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Communications",
]
dependencies = [
    "paho-mqtt",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
iotcipher-publish = "iotcipher.publishers:main"
iotcipher-subscribe = "iotcipher.subscribers:main"

[tool.hatch.build.targets.wheel]
packages = ["iotcipher"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
