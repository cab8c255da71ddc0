from __future__ import annotations

from setuptools import find_packages, setup

from config.version import PROJECT_VERSION, PYTHON_REQUIRES_SPECIFIER

if __name__ == "__main__":
    setup(
        name="newsdash-analytics",
        version=PROJECT_VERSION,
        description="Filtering, sorting and chart analytics for a personalized news dashboard",
        python_requires=PYTHON_REQUIRES_SPECIFIER,
        packages=find_packages(include=["config", "newsdash", "src", "src.*"]),
        py_modules=["main"],
        install_requires=[
            "pydantic>=2.5",
            "loguru>=0.7",
            "python-dateutil>=2.8",
            "python-dotenv>=1.0",
            "tzdata>=2024.1",
        ],
        extras_require={
            "test": [
                "pytest>=7.4",
                "hypothesis>=6.90",
            ],
        },
        entry_points={
            "console_scripts": [
                "newsdash=main:main",
                "newsdash-config=newsdash.config_manager:main",
            ],
        },
    )
