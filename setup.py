import setuptools

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='cartoproj',
    version='0.1.0',
    author='CartoProj Developers',
    description='Forward and inverse map projections on the sphere and the ellipsoid',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    package_data={'cartoproj.proj': ['registry.json']},
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: OS Independent',
        'Topic :: Scientific/Engineering :: GIS',
        'Intended Audience :: Science/Research'
    ],
    python_requires='>=3.9',
    install_requires=[
        'setuptools',
        'numpy'
    ],
    extras_require={
        'test': [
            'pytest',
            'scipy',
            'pyproj'
        ]
    }
)
