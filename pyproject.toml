[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "simmemoria"
version = "0.1.0"
description = "Simulador de asignación de memoria contigua con estrategias First-fit, Best-fit, Next-fit y Worst-fit"
requires-python = ">=3.10"
dependencies = []
keywords = ["memoria", "simulación", "sistemas operativos", "first-fit", "best-fit", "next-fit", "worst-fit"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simmemoria = "simmemoria.cli:main"

[tool.setuptools.packages.find]
include = ["simmemoria*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
