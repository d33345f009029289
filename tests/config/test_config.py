# Copyright (C) 2015 Wayne Warren
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

import os

from jenkins_freestyle import config
from jenkins_freestyle.errors import FreestyleConfigException
from tests import base


class TestConfig(base.BaseTestCase):

    fixtures_path = os.path.join(os.path.dirname(__file__), 'fixtures')

    def _fixture(self, name):
        return os.path.join(self.fixtures_path, name)

    def test_defaults(self):
        conf = config.FreestyleConfig(os.devnull)
        conf.validate()
        self.assertEqual('http://localhost:8080', conf.jenkins['url'])
        self.assertIsNone(conf.jenkins['user'])
        self.assertIsNone(conf.jenkins['password'])
        self.assertIs(config.DEFAULT_TIMEOUT, conf.jenkins['timeout'])
        self.assertFalse(conf.builder['print_job_urls'])
        self.assertIn("Using default config values", self.logger.output)
        self.assertIn("Will use anonymous access", self.logger.output)

    def test_required_config_missing(self):
        self.assertRaises(FreestyleConfigException, config.FreestyleConfig,
                          os.devnull, config_file_required=True)

    def test_settings(self):
        conf = config.FreestyleConfig(self._fixture('settings.ini'))
        conf.validate()
        self.assertEqual('https://jenkins.example.com', conf.jenkins['url'])
        self.assertEqual('jenkins', conf.jenkins['user'])
        self.assertEqual('secret', conf.jenkins['password'])
        self.assertEqual(15.0, conf.jenkins['timeout'])
        self.assertTrue(conf.builder['print_job_urls'])

    def test_other_section(self):
        conf = config.FreestyleConfig(self._fixture('settings.ini'),
                                      config_section='other')
        self.assertEqual('https://other.example.com', conf.jenkins['url'])
        self.assertIsNone(conf.jenkins['user'])

    def test_missing_section(self):
        self.assertRaises(FreestyleConfigException, config.FreestyleConfig,
                          self._fixture('settings.ini'),
                          config_section='missing')

    def test_invalid_timeout(self):
        e = self.assertRaises(FreestyleConfigException,
                              config.FreestyleConfig,
                              self._fixture('invalid_timeout.ini'))
        self.assertEqual("Jenkins timeout config is invalid", str(e))

    def test_user_without_password(self):
        conf = config.FreestyleConfig(self._fixture('user_only.ini'))
        self.assertRaises(FreestyleConfigException, conf.validate)
