from setuptools import find_packages, setup

setup(
    name="auto-favicon-injector",
    version="1.0.0",
    description="Automatically injects favicon links into HTML files",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "beautifulsoup4>=4.12",  # HTML parsing and serialization
        "pydantic>=2",  # Options and output schemas
        "typer>=0.9,<0.26",  # Command-line interface (0.26+ vendors click, bypassing click exceptions)
        "click>=8.0",  # Typer's underlying CLI toolkit (exceptions)
        "rich",  # Terminal formatting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "inject-favicon=favicon_injector.cli:main",
        ],
    },
)
