from setuptools import find_packages, setup

setup(
    name="marker",
    version="0.6.0",
    description="Markdown link checker - validates local paths, URLs and reference labels",
    author="Alex Crawford",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "markdown-it-py>=3.0",  # CommonMark tokenizer
        "mdit-py-plugins>=0.4",  # Footnotes and task lists
        "requests",  # HTTP checks
        "pydantic>=2.0",  # Configuration models
        "typer>=0.9,<0.20",  # CLI (built on click)
        "click>=8.0",  # Usage error handling in the entry point
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-requests",  # Type stubs
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "marker=marker.cli:main",
        ],
    },
)
