from setuptools import setup, find_packages

setup(
    name="fileparser",
    version="0.1.0",
    description="Strip comments and split configuration files and SQL scripts into batches",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    keywords=[
        "sql", "go", "batch", "parser", "comments",
        "configuration", "developer-tools", "scripts"
    ],
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "pyyaml>=6.0",
        "rich>=13.0",
        "typer>=0.9",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "fileparser=fileparser.cli.manage:app",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Database",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
