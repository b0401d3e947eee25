[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raspistream"
version = "0.1.0"
description = "Send raw YUV420 frame planes over UDP and reassemble whole frames on the receiving side"
requires-python = ">=3.10"
dependencies = []
keywords = ["video", "streaming", "udp", "yuv420", "frames"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
raspistream-receive = "raspistream.receiver:main"

[tool.hatch.build.targets.wheel]
packages = ["raspistream"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
