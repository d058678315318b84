from setuptools import find_packages, setup

setup(
    name="vaultreader",
    version="0.1.0",
    description="Markdown vault reader - tree, layered content, mutations and wiki reference resolution",
    packages=find_packages(include=["vaultreader", "vaultreader.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schemas
        "typer<0.26",  # CLI (0.26+ vendors its own click; code uses click exceptions/context)
        "click",  # CLI exceptions and context
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "pymongo",  # MongoDB store
        "mongomock",  # In-memory MongoDB store
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "vaultr=vaultreader.cli:main",
        ],
    },
)
