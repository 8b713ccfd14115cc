from setuptools import setup, find_packages


requires = [
    # list required third-party packages here
    'clldutils>=3.5,<4',
    'attrs>=19.2',
    'termcolor',
]

setup(
    name='pyisbnranges',
    version='1.0.0',
    description='python package to validate, convert and hyphenate ISBN numbers',
    long_description='',
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
    ],
    keywords='isbn books',
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={'pyisbnranges': ['data/*.json']},
    zip_safe=False,
    python_requires='>=3.6',
    install_requires=requires,
    extras_require={
        'test': ['pytest', 'pytest-mock', 'mock'],
    },
    entry_points={
        'console_scripts': ['isbnranges=pyisbnranges.__main__:main'],
    },
    tests_require=['pytest', 'pytest-mock', 'mock'],
)
