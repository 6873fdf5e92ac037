"""
Setup script for the x32_remote package.
"""
from setuptools import setup, find_packages

setup(
    name='x32-remote',
    version='1.0.0',
    description='OSC command layer for remote control of X32 digital mixing consoles',
    author='MControl',
    author_email='',
    url='',
    packages=find_packages(include=['x32_remote', 'x32_remote.*']),
    install_requires=[
        'python-osc>=1.9.0,<2.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'hypothesis>=6.0',
        ],
    },
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Multimedia :: Sound/Audio',
    ],
)
