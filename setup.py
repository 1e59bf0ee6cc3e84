from setuptools import find_namespace_packages, setup

setup(
    name="contextify",
    version="1.0.0",
    description="Flatten a directory tree into a single annotated text file",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["contextify", "contextify.*"]),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["contextify=contextify.cli:main"]},
)
