from setuptools import setup

# import wakectl.info without importing the package
info = {"__file__": "wakectl/info.py"}

with open("wakectl/info.py") as fp:
    exec(fp.read(), info)

version = ''
with open("wakectl/VERSION", "r") as f:
    version = f.read().strip()

with open("README.md", "r") as f:
    long_description = f.read()

with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip()]

setup(
    name=info['__package_name__'],
    version=version,
    description=info['__description__'],
    long_description=long_description,
    long_description_content_type="text/markdown",
    license=info['__license__'],
    author=info['__author__'],
    author_email=info['__author_email__'],
    python_requires='>=3.10',
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
    packages=[
        'wakectl',
        'wakectl.libraries',
        'wakectl.models',
        'wakectl.services',
        'wakectl.utils',
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Topic :: System :: Networking",
        "Topic :: Utilities",
    ],
    entry_points={
        'console_scripts': [
            'wakectl = wakectl:main',
        ],
    },
    include_package_data=True,
    package_data={
        'wakectl': [
            'VERSION',
        ],
    },
)
