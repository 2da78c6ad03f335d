from setuptools import setup, find_packages

setup(
    name="segtree",
    version="0.1.0",
    packages=find_packages(include=['segtree', 'segtree.*']),
    install_requires=[
        'numpy>=1.21.0',
        'pyyaml>=5.4.1',
        'matplotlib>=3.4.3',
        'pandas>=1.3.0',
        'seaborn>=0.11.2'
    ],
    extras_require={
        'test': ['pytest>=7.0']
    },
    description="Array-backed segment tree with logarithmic range queries and point updates",
    python_requires='>=3.8',
)
