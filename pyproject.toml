[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oxideplate"
version = "0.0.1"
description = "A plate reverb built from delay lines, all-pass diffusers and one-pole filters."
requires-python = ">=3.10"
dependencies = []
keywords = ["reverb", "plate", "audio", "dsp", "allpass", "delay"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oxideplate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
