[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autohmjeum"
version = "0.1.0"
description = "Hangeul jamo-by-jamo input composition with a line-based command-line front end"
requires-python = ">=3.11"
dependencies = []
keywords = ["hangeul", "hangul", "korean", "jamo", "input method", "syllable composition"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
autohmjeum = "autohmjeum.app:main"

[tool.hatch.build.targets.wheel]
packages = ["autohmjeum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
