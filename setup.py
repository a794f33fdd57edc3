#!/usr/bin/env python3

from setuptools import setup, find_packages

# Read requirements
with open('requirements.txt', 'r') as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

# Read README for long description
with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="pangaea_data",
    version="1.0.0",
    description="Download, cache and parse PANGAEA datasets by DOI",
    long_description=long_description,
    long_description_content_type="text/markdown",

    # Package discovery
    packages=find_packages(include=['pangaea_data', 'pangaea_data.*']),
    include_package_data=True,

    # Python version requirement
    python_requires='>=3.10',

    # Dependencies
    install_requires=requirements,
    extras_require={
        'test': ['pytest>=7.0'],
    },

    # Entry points for command-line tools
    entry_points={
        'console_scripts': [
            'pangaea-data=pangaea_data.cli:main',
        ],
    },

    # Package data
    package_data={
        'pangaea_data': ['config/*.yaml'],
    },

    # Classifiers
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Scientific/Engineering :: Information Analysis',
    ],

    # Keywords
    keywords='pangaea doi datasets earth-science oceanography',

    # License
    license='MIT',

    # Options
    zip_safe=False,
)
