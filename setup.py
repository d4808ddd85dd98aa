import setuptools

import shprompt.version

with open("README.md", "r") as readme:
    long_description = readme.read()

setuptools.setup(
    name='shprompt',
    version=shprompt.version.VERSION,
    author='Shprompt developers',
    description='A templated shell prompt',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages('.', include=['shprompt', 'shprompt.*']),
    scripts=['bin/shprompt'],
    install_requires=[
        'prompt_toolkit',
        'psutil',
        'pygit2'
    ],
    extras_require={
        'test': ['pytest']
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: POSIX :: Linux'
    ],
    python_requires='>=3.8'
)
