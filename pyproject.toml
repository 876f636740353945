[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mntinfo"
version = "0.1.0"
description = "Parse the Linux mount table, detect mount points and handle fstab-style mount options"
requires-python = ">=3.10"
dependencies = []
keywords = ["mount", "mountinfo", "procfs", "filesystem", "fstab", "tmpfs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mntinfo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
