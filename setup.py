import setuptools

setuptools.setup(
    name='partition_generator',
    author='Chenyang Li',
    author_email='bjyork0822@gmail.com',
    description='constant amortized time enumeration of integer partitions',
    version="0.1.0",
    license='MIT',
    python_requires='>=3.8',
    install_requires=['sympy>=1.13'],
    extras_require={'test': ['pytest']},
    packages=setuptools.find_packages(exclude=('tests',))
)
