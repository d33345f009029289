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
from jenkins_freestyle.document import Empty
from jenkins_freestyle.document import Scalar
from jenkins_freestyle.modules import helpers
from tests import base


class TestCaseTestHelpers(base.BaseTestCase):

    def test_scalar_or_empty(self):
        self.assertEqual(Empty('name'), helpers.scalar_or_empty('name', None))
        self.assertEqual(Scalar('name', False),
                         helpers.scalar_or_empty('name', False))

    def test_typed_element(self):
        element = helpers.typed_element('submoduleCfg', 'list')
        self.assertEqual(Element('submoduleCfg', [Attribute('class', 'list')]),
                         element)

    def test_convert_mapping_to_nodes(self):
        nested = Element('branches', [])
        nodes = helpers.convert_mapping_to_nodes([
            ('configVersion', '2'),
            ('reference', None),
            ('branches', nested),
            ('skipTag', False),
        ])
        self.assertEqual([Scalar('configVersion', '2'), Empty('reference'),
                          nested, Scalar('skipTag', False)], nodes)
