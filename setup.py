# setup.py
from setuptools import setup, find_packages

# Version is defined here to avoid import issues during build
__version__ = "0.1.0"

setup(
    name='rsm',
    version=__version__,
    description='Rime Schema Manager - add, remove, reorder and sync Rime input-method schemas.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    author='AOSC-Dev',
    url='https://github.com/AOSC-Dev/rsm',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=[
        'click>=8.1.0',
        'rich>=13.0.0',
        'ruamel.yaml>=0.17.21',
        'pydantic>=2.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'PyYAML>=6.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'rsm = rsm.cli:cli',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: POSIX :: Linux",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Text Processing :: Linguistic",
        "Topic :: Utilities",
    ],
    python_requires='>=3.10',
    keywords='rime, ime, input method, schema, configuration',
)
