from setuptools import setup, find_packages

setup(
    name='Taglet',
    version='0.1.dev0',
    description='HTML markup synthesizer for programmatic UI assembly',
    author='Vladimir Magamedov',
    author_email='vladimir@magamedov.com',
    packages=find_packages(exclude=['tests', 'tests.*']),
    license='BSD',
    install_requires=['markupsafe'],
    extras_require={
        'cli': ['click'],
        'test': ['pytest', 'click'],
    }
)
