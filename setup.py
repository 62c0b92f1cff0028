from setuptools import setup, find_packages

setup(
    name='stardog-api-client',
    version='0.1.0',
    author='Marc Hadfield',
    author_email='marc@vital.ai',
    description='Async client for the Stardog HTTP API',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/vital-ai/stardog-api-client',
    packages=find_packages(exclude=["stardog_api_test", "stardog_api_test.*"]),
    include_package_data=True,

    license='Apache License 2.0',
    install_requires=[
        "httpx>=0.27.0",
        "pydantic>=2.6.0",
        "PyYAML>=6.0",
        "rdflib>=7.0.0",
        "aiofiles",
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-asyncio>=0.23',
        ],
    },

    classifiers=[
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.11',
)
