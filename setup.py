from setuptools import setup, find_packages


# configure setup
setup(
    name='orrerypy',
    version='0.1',
    description='Toolkit for simulating stars, planets, moons, and comets on simple circular orbits',
    long_description='',
    packages=find_packages(include=['orrerypy', 'orrerypy.*']),
    dependency_links=[],
    python_requires='>=3',
    install_requires=[
    'numpy >= 1.11',
    'matplotlib >= 2.0',
    'astropy >= 3.0.4'],
    extras_require={
    'test': [
      'pytest >= 3.0', ]},
    keywords=['astronomy', 'astrophysics', 'space', 'science',
              'units', 'orbits', 'solar system', 'simulation'],
    classifiers=[
        'Intended Audience :: Science/Research',
        'Intended Audience :: Education',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Astronomy',
        'Topic :: Scientific/Engineering :: Physics'
    ],
    include_package_data=True,
    zip_safe=False)
