from setuptools import setup, find_packages

setup(
    name='grouping-by',
    version='0.1.0',
    description='Group, count, select and sum iterables by key',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    include_package_data=True,
    install_requires=[
        'click',
        'pydantic>=2',
        'pyyaml',
        'rich',
        'rich-click',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    entry_points={
        'console_scripts': [
            'grouping-by = grouping_by.cli:app',
        ],
    },
)
