import re
import json
from pathlib import Path

from setuptools import setup, find_packages

HERE = Path(__file__).resolve().parent

version_re = re.compile(r"^__version__\s*=\s*'(?P<version>.*)'$", re.M)
def version():
    match = version_re.search(Path(HERE, 'helpkit/__init__.py').read_text())
    if match:
        return match.groupdict()['version'].strip()
    raise AttributeError(
        'Could not find __version__ attribute in helpkit/__init__.py'
    )

def load_scripts():
    scripts = json.loads(Path(HERE, 'scripts.json').read_text())
    return [f'{script}={path}' for script, path in scripts]

long_description = Path(HERE, 'README.md').resolve().read_text()

setup(
    name='helpkit',
    packages=find_packages(
        exclude=['tests', 'tests.*'],
    ),
    package_dir={
        'helpkit': 'helpkit',
    },

    install_requires=[
        'click',
        'coloredlogs',
        'pillow',
        'pymaybe',
        'pyrsistent',
        'ruamel.yaml>=0.17',
        'toolz',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    python_requires='>=3.10',

    version=version(),
    description=(
        'File splitting/joining, MIME type lookups and nested data access'
        ' helpers'
    ),
    long_description=long_description,
    long_description_content_type='text/markdown',

    license='MIT',

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.10',
    ],

    zip_safe=False,

    keywords=('utilities functional toolz files mime split join'),

    entry_points={
        'console_scripts': load_scripts(),
    },
)
