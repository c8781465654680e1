[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quickread"
version = "1.0.5"
description = "Text preparation for reading text aloud: substitution rules, speaker tagging and history"
requires-python = ">=3.10"
dependencies = []
keywords = ["text-to-speech", "tts", "rules", "speech", "text-filter"]
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
    "Topic :: Multimedia :: Sound/Audio :: Speech",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quickread = "quickread.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quickread"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
