import setuptools

setuptools.setup(
    name='dice-command',
    version='1.0.0',
    description='For parsing narrative dice roll commands.',
    packages=setuptools.find_packages(exclude=['tests'])
)
