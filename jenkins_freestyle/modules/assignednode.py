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
The Assigned Node section specifies which Jenkins node (or named group)
should run the job.

Example::

  - name: test_job
    assigned_node: precise

That specifies that the job should be run on a Jenkins node or node group
named ``precise``.  Without ``assigned_node``, or with an empty one, the
job may roam to any node.
"""

from jenkins_freestyle.document import Empty
from jenkins_freestyle.document import Scalar
import jenkins_freestyle.modules.base


def can_roam(config):
    node = config.assigned_node
    return not (isinstance(node, str) and node)


class AssignedNode(jenkins_freestyle.modules.base.Base):

    component_type = 'node'
    tag = 'assignedNode'

    def gen_nodes(self, config):
        if can_roam(config):
            assigned = Empty('assignedNode')
        else:
            assigned = Scalar('assignedNode', config.assigned_node)
        return [assigned, Scalar('canRoam', can_roam(config))]
