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

from jenkins_freestyle.document import Attribute
from jenkins_freestyle.document import Element
from jenkins_freestyle.document import Scalar
from jenkins_freestyle.modules import triggers
from jenkins_freestyle import params
from tests import base


class TestCaseTriggers(base.BaseTestCase):

    def _nodes(self, job_params):
        return triggers.Triggers().gen_nodes(params.normalize(job_params))

    def test_vector_tag_always_first(self):
        for job_params in [{}, {'timer': '@daily'}, {'polling': '@hourly'},
                           {'timer': '@daily', 'polling': '@hourly'}]:
            nodes = self._nodes(job_params)
            self.assertEqual(Attribute('class', 'vector'), nodes[0])
            self.assertEqual(1 + ('timer' in job_params) +
                             ('polling' in job_params), len(nodes))

    def test_timer_before_polling(self):
        nodes = self._nodes({'polling': 'H/5 * * * *', 'timer': '@daily'})
        self.assertEqual(
            [Element('hudson.triggers.TimerTrigger',
                     [Scalar('spec', '@daily')]),
             Element('hudson.triggers.SCMTrigger',
                     [Scalar('spec', 'H/5 * * * *')])],
            nodes[1:])

    def test_schedule_not_validated(self):
        nodes = self._nodes({'timer': 'not a schedule'})
        self.assertEqual(Scalar('spec', 'not a schedule'),
                         nodes[1].find('spec'))

    def test_empty_schedule_skipped(self):
        self.assertEqual([Attribute('class', 'vector')],
                         self._nodes({'timer': '', 'polling': None}))
