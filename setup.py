# Copyright 2012 Hewlett-Packard Development Company, L.P.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License. You may obtain
# a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.

import setuptools

requires = [
    'python-jenkins>=1.0.0',
    'PyYAML>=3.10',
    'stevedore>=1.17.1',
]
test_requires = [
    'fixtures>=3.0.0',
    'testscenarios>=0.4',
    'testtools>=2.2.0',
    'pytest',
]


setuptools.setup(
    name='jenkins-freestyle',
    version='0.1.0',
    description='Generate and upload Jenkins freestyle job configurations',
    license='Apache License, Version 2.0',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=requires,
    extras_require={'test': test_requires},
    python_requires='>=3.6',
    zip_safe=False,
    classifiers=[
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    entry_points={
        'console_scripts': [
            'jenkins-freestyle=jenkins_freestyle.cli.entry:main',
        ],
        'jenkins_freestyle.cli.subcommands': [
            'test=jenkins_freestyle.cli.subcommand.test:TestSubCommand',
            'update=jenkins_freestyle.cli.subcommand.update:UpdateSubCommand',
        ],
    }
)
