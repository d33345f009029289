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
Triggers define what causes a Jenkins job to start building.

The ``triggers`` section always carries ``class="vector"``, Jenkins expects
the typed collection even when no trigger is configured.  Schedules are
passed through as written, Jenkins validates the crontab syntax.

:Job Parameters:
    * **timer** (`str`) - build periodically on this schedule
    * **polling** (`str`) - poll the SCM on this schedule and build when
      changes are found

Example::

  - name: test_job
    timer: '@midnight'
    polling: 'H/15 * * * *'
"""

from jenkins_freestyle.document import Attribute
from jenkins_freestyle.document import Element
from jenkins_freestyle.document import Scalar
import jenkins_freestyle.modules.base


def timed(config):
    return Element('hudson.triggers.TimerTrigger', [
        Scalar('spec', config.timer_spec),
    ])


def pollscm(config):
    return Element('hudson.triggers.SCMTrigger', [
        Scalar('spec', config.poll_spec),
    ])


class Triggers(jenkins_freestyle.modules.base.Base):

    component_type = 'trigger'
    tag = 'triggers'

    def gen_nodes(self, config):
        triggers = [Attribute('class', 'vector')]
        if config.timer_spec:
            triggers.append(timed(config))
        if config.poll_spec:
            triggers.append(pollscm(config))
        return triggers
