from setuptools import setup, find_packages

setup(
    name="simpsonrule",
    version="0.1.0",
    description="Definite integrals of user-supplied expressions by composite Simpson's rule",
    author="adamfilli",
    packages=find_packages(include=["simpsonrule", "simpsonrule.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "mcp": ["mcp>=1,<2"],
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
