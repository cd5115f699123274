[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustcraft"
version = "0.1.0"
description = "Small worked programs: number puzzles, a protobuf reader, a text GUI, loggers, a link checker, dining philosophers and a websocket chat"
requires-python = ">=3.10"
keywords = [
    "collatz",
    "luhn",
    "protobuf",
    "binary-tree",
    "text-gui",
    "link-checker",
    "dining-philosophers",
    "websocket",
    "chat",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "requests>=2.28",
    "beautifulsoup4>=4.11",
    "websockets>=13.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
    "responses>=0.23",
]

[project.scripts]
rustcraft-widgets = "rustcraft.widgets:main"
rustcraft-elevator = "rustcraft.elevator:main"
rustcraft-ls = "rustcraft.directory:main"
rustcraft-linkcheck = "rustcraft.linkchecker:main"
rustcraft-philosophers = "rustcraft.philosophers:main"
rustcraft-async-philosophers = "rustcraft.async_philosophers:main"
rustcraft-chat-server = "rustcraft.chat_server:main"
rustcraft-chat-client = "rustcraft.chat_client:main"

[tool.hatch.build.targets.wheel]
packages = ["rustcraft"]

[tool.hatch.build.targets.sdist]
include = ["rustcraft", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
