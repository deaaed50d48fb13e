[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glplayground"
version = "0.1.0"
description = "Small 2D games and graphics toys with window-free game logic: an asteroids arena, Snake, tic-tac-toe, a Sierpinski chaos game and more."
requires-python = ">=3.10"
keywords = ["games", "asteroids", "snake", "tic-tac-toe", "sierpinski", "pygame", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
glplayground-asteroids = "glplayground.asteroids_app:main"
glplayground-snake = "glplayground.snake_app:main"
glplayground-tictactoe = "glplayground.tictactoe:main"
glplayground-sierpinski = "glplayground.sierpinski:main"
glplayground-coloredtriangles = "glplayground.coloredtriangles:main"
glplayground-regularpolygons = "glplayground.regularpolygons_app:main"
glplayground-helloworld = "glplayground.helloworld:main"

[tool.hatch.build.targets.wheel]
packages = ["glplayground"]

[tool.pytest.ini_options]
addopts = "-ra"
