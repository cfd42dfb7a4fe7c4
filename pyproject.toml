[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "simtext"
version = "2.1.0"
description = "Text similarity checker using cosine, TF-IDF and Jaccard shingle measures"
requires-python = ">=3.10"
dependencies = []
keywords = ["similarity", "plagiarism", "cosine", "tf-idf", "jaccard", "shingling", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
simtext = "simtext.cli:main"

[tool.setuptools.packages.find]
include = ["simtext*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
