from setuptools import find_packages, setup


install_requires = (
    "aiohttp>=3.11.0",
    "aiohttp-remotes>=1.2.0",
    "neuro-logging>=22.6",
    "pydantic>=2.0",
    "sentry-sdk>=1.40",
)

tests_require = (
    "multidict>=6.0",
    "pytest>=7.4",
    "pytest-aiohttp>=1.0.5",
    "pytest-asyncio>=0.23",
)

setup(
    name="basic-auth-guard",
    version="1.0.0",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=install_requires,
    extras_require={"test": tests_require},
    python_requires=">=3.11",
    entry_points={"console_scripts": "basic-auth-guard=basic_auth_guard.api:main"},
)
