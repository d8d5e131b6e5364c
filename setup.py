from setuptools import setup, find_namespace_packages

setup(
    name="media-shelf",
    version="0.1.0",
    packages=find_namespace_packages(include=['mediashelf*', 'mediashelf_cli*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "media-shelf=mediashelf_cli.main:main",
        ],
    },
)
