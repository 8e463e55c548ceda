from setuptools import setup, find_packages

setup(
    name="sello-search",
    version="1.2.0",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "pandas>=2.0",
        "numpy>=1.24",
        "python-dateutil>=2.8",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "sello-search=sello_search.cli:main",
        ],
    },
    python_requires=">=3.9",
    description="Intent parsing and suggestion ranking for a chip-driven analytics search box",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ]
)
