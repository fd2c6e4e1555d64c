from setuptools import find_packages, setup

setup(
    name="onbalance",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">= 3.11",
    entry_points={
        "console_scripts": [
            "onbalance=onbalance.__main__:main",
        ],
    },
    install_requires=[
        "colorlog",
        "mergedeep",
        "pyyaml",
        "simplejson",
    ],
    extras_require={
        "dev": [
            "black",
            "flake8",
            "flake8-bugbear",
            "flake8-comprehensions",
            "flake8-isort",
            "isort",
            "mypy",
            "pytest",
            "types-pyyaml",
            "types-setuptools",
            "types-simplejson",
        ],
    },
)
