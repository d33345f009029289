# Copyright 2012 Hewlett-Packard Development Company, L.P.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.


"""
Wrappers can alter the way the build is run as well as the build output.

:Job Parameters:
    * **env_inject** (`dict`) - variables injected into the build
      environment.  Requires the Jenkins EnvInject Plugin.

Variables are written one ``KEY=value`` per line in the iteration order of
``env_inject``, pass an ordered mapping or a list of pairs when the order
of the generated XML matters.

Example::

  - name: test_job
    env_inject:
      - [FOO, bar]
      - [BAZ, qux]
"""

from jenkins_freestyle.document import Element
from jenkins_freestyle.document import Scalar
import jenkins_freestyle.modules.base


def properties_content(env_inject):
    return ''.join('{0}={1}\n'.format(key, value)
                   for key, value in env_inject.items())


def inject(config):
    return Element('EnvInjectBuildWrapper', [
        Element('info', [
            Scalar('propertiesContent',
                   properties_content(config.env_inject)),
            Scalar('loadFilesFromMaster', False),
        ]),
    ])


class Wrappers(jenkins_freestyle.modules.base.Base):

    component_type = 'wrapper'
    tag = 'buildWrappers'

    def gen_nodes(self, config):
        wrappers = []
        if config.env_inject:
            wrappers.append(inject(config))
        return wrappers
