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

# Base class for a jenkins_freestyle module


class Base(object):
    """
    A base class for a Jenkins Freestyle Module.

    A module turns a normalized :class:`~jenkins_freestyle.params.JobConfig`
    into the list of document nodes for one section of the job.  Modules
    hold no state between calls, so a single instance may serve any number
    of jobs.
    """

    #: The component type for components of this module.  Used in log
    #: messages.
    component_type = None

    #: The name of the element wrapping the generated nodes.
    tag = None

    def gen_nodes(self, config):
        """Build the document nodes for this section.

        :arg JobConfig config: the normalized job parameters
        :rtype: list
        """

        return []
