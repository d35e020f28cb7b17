import os
from setuptools import setup, find_packages

long_description = ""
if os.path.exists("README.md"):
    with open("README.md", "r", encoding="utf-8") as readme:
        long_description = readme.read()

setup(
    name="graphql-changelog",
    version="0.1.0",
    description="Build documentation changelog entries from GraphQL schema diffs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["graphql_changelog", "graphql_changelog.*"]),
    include_package_data=True,
    install_requires=[
        "Django>=4.2.27",
        "graphql-core>=3.2,<3.3",
        "requests>=2.32.4",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-django>=4.5",
        ],
    },
    entry_points={
        "console_scripts": [
            "graphql-changelog=graphql_changelog.bin.graphql_changelog:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Framework :: Django",
        "Framework :: Django :: 4.2",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.9",
)
