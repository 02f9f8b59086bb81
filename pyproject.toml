[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gptclient"
version = "0.1.0"
description = "A client for OpenAI-compatible and Azure OpenAI HTTP APIs: chat, completions, edits, embeddings, engines, files and audio."
requires-python = ">=3.10"
keywords = ["openai", "azure", "gpt", "chat", "completion", "embeddings", "whisper", "api-client"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gptclient = "gptclient.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gptclient"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
