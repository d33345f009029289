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
Builders define actions that the Jenkins job should execute.

:Job Parameters:
    * **shell_command** (`str`) - execute a shell command

Example::

  - name: test_job
    shell_command: |
      make
      make test
"""

from jenkins_freestyle.document import Element
from jenkins_freestyle.document import Scalar
import jenkins_freestyle.modules.base


def shell(config):
    return Element('hudson.tasks.Shell', [
        Scalar('command', config.shell_command),
    ])


class Builders(jenkins_freestyle.modules.base.Base):

    component_type = 'builder'
    tag = 'builders'

    # later builders are appended after the existing ones
    builders = [
        ('shell_command', shell),
    ]

    def gen_nodes(self, config):
        return [builder(config) for field, builder in self.builders
                if getattr(config, field)]
