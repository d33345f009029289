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
The Freestyle Project module assembles the complete ``config.xml`` document
of a freestyle Jenkins project from the normalized job parameters.

Jenkins reads the document positionally, so the sections are always
emitted in this order: ``actions``, ``description``, ``keepDependencies``,
``properties``, ``scm``, ``disabled``, ``blockBuildWhenDownstreamBuilding``,
``blockBuildWhenUpstreamBuilding``, ``triggers``, ``concurrentBuild``,
``publishers``, ``buildWrappers``, ``builders``, ``assignedNode`` and
``canRoam``.

Example::

  - name: test_job
    keep_dependencies: true
    concurrent_build: true
    shell_command: make
"""

import logging

from jenkins_freestyle.document import Element
from jenkins_freestyle.document import Empty
from jenkins_freestyle.modules.assignednode import AssignedNode
import jenkins_freestyle.modules.base
from jenkins_freestyle.modules.builders import Builders
import jenkins_freestyle.modules.helpers as helpers
from jenkins_freestyle.modules.scm import SCM
from jenkins_freestyle.modules.triggers import Triggers
from jenkins_freestyle.modules.wrappers import Wrappers

logger = logging.getLogger(__name__)


class Freestyle(jenkins_freestyle.modules.base.Base):

    tag = 'project'

    def __init__(self):
        self.scm = SCM()
        self.triggers = Triggers()
        self.wrappers = Wrappers()
        self.builders = Builders()
        self.assigned_node = AssignedNode()

    def section(self, module, config):
        logger.debug("Generating %s section <%s>", module.component_type,
                     module.tag)
        return Element(module.tag, module.gen_nodes(config))

    def gen_nodes(self, config):
        return [
            Empty('actions'),
            helpers.scalar_or_empty('description', config.description),
            helpers.scalar_or_empty('keepDependencies',
                                    config.keep_dependencies),
            Empty('properties'),
            self.section(self.scm, config),
            helpers.scalar_or_empty('disabled', config.disabled),
            helpers.scalar_or_empty('blockBuildWhenDownstreamBuilding',
                                    config.block_downstream),
            helpers.scalar_or_empty('blockBuildWhenUpstreamBuilding',
                                    config.block_upstream),
            self.section(self.triggers, config),
            helpers.scalar_or_empty('concurrentBuild',
                                    config.concurrent_build),
            Empty('publishers'),
            self.section(self.wrappers, config),
            self.section(self.builders, config),
        ] + self.assigned_node.gen_nodes(config)

    def root_node(self, config):
        return Element(self.tag, self.gen_nodes(config))
