[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tablebill"
version = "1.0.0"
description = "Restaurant billing at the terminal: menu, table booking, orders, bills, order history and customer feedback"
requires-python = ">=3.10"
dependencies = []
keywords = ["restaurant", "billing", "point-of-sale", "orders", "tables", "feedback"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tablebill = "tablebill.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tablebill"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
