from setuptools import find_packages, setup

setup(
    name="hgctl",
    version="0.1.0",
    description="Service controller for the helium_gateway daemon - start, stop and restart via a PID file",
    packages=find_packages(include=["hgctl", "hgctl.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "python-dotenv>=1.0",  # Environment override file parsing
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "hgctl=hgctl.cli:main",
        ],
    },
)
