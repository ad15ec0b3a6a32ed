from setuptools import setup, find_packages

setup(
    name='spatial3d',
    version='1.0.0',
    description='Quaternion rotations, poses, and 3D primitives with approximate equality semantics',
    packages=find_packages(include=['spatial3d', 'spatial3d.*']),
    python_requires='>=3.11',
    install_requires=['numpy', 'pandas'],
    extras_require={'test': ['pytest']},
)
