#! /usr/bin/env python3
import os

import setuptools

name = "iiif-creator"
version_fname = "VERSION"

# `import iiif_creator` here would need the packages in "requirements.txt" at build time,
# so package level variables used while building are copied here
iiif_name = "iiif_creator"
iiif_res_pkg = 'res'
iiif_ver_pkg = 'ver'


if os.path.exists(version_fname):
    with open(version_fname, 'r') as version_f:
        version = version_f.read().strip()
else:
    raise ValueError(f"Cannot find {version_fname} file.")

with open('README.md') as readme:
    long_desc = readme.read()

with open('requirements.txt') as requirements:
    requires = requirements.readlines()

setuptools.setup(
    name=name,
    version=version,
    description="Python builder and serializer for IIIF Presentation API 3.0 documents. (https://iiif.io/api/presentation/3.0/)",
    long_description=long_desc,
    long_description_content_type="text/markdown",
    url="https://iiif.io/api/presentation/3.0/",
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    # this is for *building*, building (build, bdist_*) doesn't get along with MANIFEST.in
    # so using this param explicitly is much safer implementation
    package_data={
        iiif_name: [f'{iiif_res_pkg}/*', f'{iiif_ver_pkg}/*'],
    },
    install_requires=requires,
    extras_require={
        'dev': [
            'pytest',
            'pytest-cov',
            'hypothesis',
        ]
    },
    python_requires='>=3.9',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers ',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3 :: Only',
    ]
)
