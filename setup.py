from setuptools import find_packages, setup

setup(
    name="bytefmt",
    version="0.1.0",
    description="Human-readable byte counts with printf-style directives",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
