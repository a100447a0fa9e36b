from setuptools import setup, find_packages

setup(
    name='gridboost',
    version='0.1.0',
    packages=find_packages(include=['gridboost', 'gridboost.*']),
    install_requires=[
        'matplotlib',
        'numpy',
        'polars>=1.0',
        'requests',
        'scikit-learn',
        'tqdm',
        'xgboost',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.10',
    description='Formula-driven xgboost grid search with repeated train/test splits.',
)
