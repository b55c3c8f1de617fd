[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deskkit"
version = "0.1.0"
description = "Small console tools: facility route optimisation, a question generator, a product and expense ledger, and a line-based TCP echo server and client"
requires-python = ">=3.10"
dependencies = []
keywords = ["minimum spanning tree", "kruskal", "inventory", "expenses", "tcp", "echo server", "question generator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
deskkit-allocation = "deskkit.allocation:main"
deskkit-questions = "deskkit.questions:main"
deskkit-erp = "deskkit.erp:main"
deskkit-server = "deskkit.chat_server:main"
deskkit-client = "deskkit.chat_client:main"

[tool.hatch.build.targets.wheel]
packages = ["deskkit"]

[tool.pytest.ini_options]
addopts = "-ra"
