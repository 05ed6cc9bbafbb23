from setuptools import setup, find_packages

setup(
    name="hostlist-expr",
    version="1.0.0",
    description="Parse and expand cluster hostlist expressions like web[01-03,05],db1",
    python_requires=">=3.9",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
