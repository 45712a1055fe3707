from setuptools import setup, find_packages

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name='bnbwallet',
    version='0.1.0',
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        'web3>=7.0,<8',
        'eth-account>=0.13',
        'eth-utils>=4.0',
        'aiohttp>=3.9',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-asyncio>=0.23',
            'hexbytes',
        ],
    },
    python_requires='>=3.10',
    description='async BNB Smart Chain / EVM wallet for balances and transfers',
    long_description=long_description,
    long_description_content_type="text/markdown"
)
