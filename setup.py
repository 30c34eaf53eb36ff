import os

from setuptools import find_packages, setup

setup(
    name="rustic",
    version="0.1.0",
    packages=find_packages(include=["rustic", "rustic.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
        "httpx>=0.27,<1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "hypothesis>=6.100",
            "pytest-asyncio>=0.23",
        ],
    },
    author="Rustic Contributors",
    description="Result and Option wrappers, exhaustive dispatch and structural validation for plain data",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
