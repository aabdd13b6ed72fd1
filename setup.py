from setuptools import setup, find_packages

def parse_requirements(requirements):
    with open(requirements) as f:
        return [l.strip('\n') for l in f if l.strip('\n') and not l.startswith('#')]

requirements = parse_requirements("requirements.txt")

setup(
    name='ado_entitlements_client',
    version='0.1.0',
    description='Async typed client for the Azure DevOps Member Entitlement Management REST API',
    python_requires='>=3.9',
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "respx>=0.20.2",
        ],
    },
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["ado_entitlements_client*", "ado_entitlements_types*"]),
)
