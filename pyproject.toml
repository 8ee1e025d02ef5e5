[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kinder"
version = "0.1.0"
description = "Helpers for kubeadm contributors: a CLI front end that checks cluster and artifact options, a node container entrypoint and a source header checker"
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "kubeadm", "kind", "testing", "boilerplate", "entrypoint"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kinder = "kinder.cli:main"
kinder-verify-boilerplate = "kinder.boilerplate:main"
kinder-entrypoint = "kinder.entrypoint:main"

[tool.hatch.build.targets.wheel]
packages = ["kinder"]

[tool.pytest.ini_options]
addopts = "-ra"
