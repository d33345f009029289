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

from collections import OrderedDict

from jenkins_freestyle.errors import ValidationError
from jenkins_freestyle import params
from tests import base


class TestCaseNormalize(base.BaseTestCase):

    def test_defaults(self):
        config = params.normalize({})
        self.assertFalse(config.keep_dependencies)
        self.assertFalse(config.block_downstream)
        self.assertFalse(config.block_upstream)
        self.assertFalse(config.concurrent_build)
        self.assertIsNone(config.scm_provider)
        self.assertEqual('master', config.scm_branch)
        self.assertFalse(config.scm_branch_given)
        self.assertFalse(config.scm_use_head_if_tag_not_found)
        self.assertEqual({}, config.assigned_node)
        self.assertEqual(OrderedDict(), config.env_inject)
        self.assertFalse(config.disabled)

    def test_none_is_empty_params(self):
        self.assertEqual(params.normalize({}), params.normalize(None))

    def test_caller_overrides_defaults(self):
        config = params.normalize({
            'keep_dependencies': True,
            'scm_branch': 'stable',
            'timer': '@daily',
            'polling': '@hourly',
            'shell_command': 'make',
        })
        self.assertTrue(config.keep_dependencies)
        self.assertEqual('stable', config.scm_branch)
        self.assertTrue(config.scm_branch_given)
        self.assertEqual('@daily', config.timer_spec)
        self.assertEqual('@hourly', config.poll_spec)
        self.assertEqual('make', config.shell_command)

    def test_falsy_values_honoured(self):
        config = params.normalize({
            'scm_branch': '',
            'assigned_node': '',
            'env_inject': None,
        })
        self.assertEqual('', config.scm_branch)
        self.assertFalse(config.scm_branch_given)
        self.assertEqual('', config.assigned_node)
        self.assertEqual(OrderedDict(), config.env_inject)

    def test_unknown_parameter_ignored(self):
        config = params.normalize({'colour': 'blue'})
        self.assertEqual(params.normalize({}), config)
        self.assertIn("Ignoring unknown job parameter 'colour'",
                      self.logger.output)

    def test_env_inject_pairs_keep_order(self):
        config = params.normalize({
            'env_inject': [('ZED', '1'), ('ALPHA', '2')],
        })
        self.assertEqual([('ZED', '1'), ('ALPHA', '2')],
                         list(config.env_inject.items()))

    def test_env_inject_string_ignored(self):
        config = params.normalize({'env_inject': 'FOO=bar'})
        self.assertEqual(OrderedDict(), config.env_inject)
        self.assertIn("Ignoring env_inject of type str", self.logger.output)

    def test_env_inject_malformed_pairs_skipped(self):
        config = params.normalize({
            'env_inject': [['FOO', 'bar'], 'BAZ', ('A', 'b', 'c')],
        })
        self.assertEqual([('FOO', 'bar')], list(config.env_inject.items()))
        self.assertIn("Ignoring malformed env_inject entry 'BAZ'",
                      self.logger.output)

    def test_record_is_immutable(self):
        config = params.normalize({})
        self.assertRaises(AttributeError, setattr, config, 'scm_url', 'x')


class TestCaseValidation(base.BaseTestCase):

    def test_provider_without_url(self):
        for provider in ['git', 'svn', 'cvs', 'hg']:
            e = self.assertRaises(ValidationError, params.normalize,
                                  {'scm_provider': provider})
            self.assertEqual('SCM provider URL must be specified', str(e))

    def test_provider_with_empty_url(self):
        for url in ['', None]:
            self.assertRaises(ValidationError, params.normalize,
                              {'scm_provider': 'git', 'scm_url': url})

    def test_provider_with_url(self):
        for provider in ['git', 'svn', 'cvs']:
            config = params.normalize({'scm_provider': provider,
                                       'scm_url': 'https://x/repo'})
            self.assertEqual(provider, config.scm_provider)
            self.assertEqual('https://x/repo', config.scm_url)

    def test_url_without_provider(self):
        config = params.normalize({'scm_url': 'https://x/repo'})
        self.assertIsNone(config.scm_provider)
