from setuptools import setup, find_packages
import re

# Read version from brutnet/__init__.py
with open('brutnet/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='brutnet',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'brutnet': ['rate-tables/*.yaml'],
    },
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'brutnet=brutnet.cli.__main__:main',
            'brutnet-mcp=brutnet.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='French gross/net salary, income tax and employer cost estimates.',
    python_requires='>=3.10',
)
