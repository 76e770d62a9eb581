[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptoexercises"
version = "0.1.0"
description = "Worked number theory, finite field and classroom cryptography exercises with step-by-step output"
requires-python = ">=3.10"
dependencies = [
    "sympy",
]
keywords = [
    "number theory",
    "finite fields",
    "polynomials",
    "cryptography",
    "aes",
    "rsa",
    "elliptic curves",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cryptoexercises = "cryptoexercises.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptoexercises"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
