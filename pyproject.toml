[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rvencode"
version = "0.1.0"
description = "Encoders for RISC-V machine instructions, including compressed and bit-manipulation extensions"
requires-python = ">=3.10"
dependencies = []
keywords = ["risc-v", "riscv", "assembler", "encoder", "jit", "machine-code"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Assemblers",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rvencode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
