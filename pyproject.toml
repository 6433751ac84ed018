[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "escape-pokemon"
version = "1.0.0"
description = "Juego de escape de texto: salí de la habitación interactuando con sus objetos"
requires-python = ">=3.10"
dependencies = []
keywords = ["juego", "escape", "aventura", "texto", "pokemon", "consola"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
escape-pokemon = "escape_pokemon.juego:main"
escape-pokemon-resumen = "escape_pokemon.resumen:main"

[tool.hatch.build.targets.wheel]
packages = ["escape_pokemon"]

[tool.pytest.ini_options]
addopts = "-ra"
