"""Setup script for bracesets."""
import re

from setuptools import setup, find_packages  # type: ignore

with open('bracesets/__init__.py') as init_file:
    version = re.search(r"^version = '([^']+)'", init_file.read(), re.M).group(1)  # type: ignore

setup(
    name='bracesets',
    version=version,
    description='Parse, canonicalize and combine nested sets written as brace expressions',  # noqa
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Text Processing',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.12',
    ],
    keywords='sets parser red-black-tree',
    packages=find_packages(),  # type: ignore
    python_requires='>=3.12',
    install_requires=['parsy>=1.3.0,<3', 'typing-extensions>=4'],
    extras_require={
        'test': ['coverage>=6.4.4', 'hypothesis>=6.70'],
        'dev': ['axblack==20220330', 'mypy>=1.1.1', 'pre-commit>=2.6.0'],
    },
)
