[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xmlsqueeze"
version = "0.1.0"
description = "Compress XML documents with minifying, tag mapping, closing-tag removal and Huffman coding"
requires-python = ">=3.10"
dependencies = []
keywords = ["xml", "compression", "huffman", "minify", "tag mapping"]
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
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xmlsqueeze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
