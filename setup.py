from setuptools import find_packages, setup

setup(
    name="larc",
    version="0.1.0",
    description="larc - archive the links of Markdown and Org documents",
    packages=find_packages(include=["larc", "larc.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Configuration and output schemas
        "typer>=0.16,<0.20",  # CLI, on click
        "click>=8.0",  # CLI context and usage errors
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output and companion front matter
        "jinja2",  # Template rendering for redirect stubs
        "requests",  # Default page fetcher
        "beautifulsoup4",  # Artifact and page parsing
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-requests",  # Type stubs
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "larc=larc.cli:main",
        ],
    },
)
