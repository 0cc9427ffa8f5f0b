from setuptools import setup, find_packages

setup(
    name="declargs",
    version="0.1.0",
    description="Declarative command-line arguments with range-aware collection readers.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich",
        "pydantic>=2",
        "pyyaml",
        "toml",
        "python-json-logger>=3.1",
        "python-dateutil",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "declargs=declargs.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
