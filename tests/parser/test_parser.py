# Copyright (C) 2015 OpenStack, LLC.
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

import io
import os

from jenkins_freestyle import errors
from jenkins_freestyle.parser import YamlParser
from tests import base


class TestCaseYamlParser(base.BaseTestCase):

    fixtures_path = os.path.join(os.path.dirname(__file__), 'fixtures')

    def _fixture(self, name):
        return os.path.join(self.fixtures_path, name)

    def test_single_mapping(self):
        parser = YamlParser()
        parser.load_files([self._fixture('single.yaml')])
        self.assertEqual([{'name': 'single-job',
                           'scm_provider': 'git',
                           'scm_url': 'https://example.com/repo.git'}],
                         parser.get_jobs())

    def test_list(self):
        parser = YamlParser()
        parser.load_files([self._fixture('list.yaml')])
        self.assertEqual(['build-app', 'build-docs', 'nightly'],
                         [job['name'] for job in parser.get_jobs()])

    def test_names_filter(self):
        parser = YamlParser()
        parser.load_files([self._fixture('list.yaml')])
        self.assertEqual(['build-app', 'build-docs'],
                         [job['name'] for job in
                          parser.get_jobs(['build-*'])])

    def test_directory(self):
        parser = YamlParser()
        parser.load_files([self._fixture('dir')])
        self.assertEqual(['single-job', 'build-app', 'build-docs',
                          'nightly'],
                         [job['name'] for job in parser.get_jobs()])

    def test_stream(self):
        parser = YamlParser()
        parser.load_files([io.StringIO(u"- name: from-stdin\n")])
        self.assertEqual([{'name': 'from-stdin'}], parser.get_jobs())

    def test_empty_stream(self):
        parser = YamlParser()
        parser.load_files([io.StringIO(u"")])
        self.assertEqual([], parser.get_jobs())

    def test_duplicate(self):
        parser = YamlParser()
        e = self.assertRaises(errors.JenkinsFreestyleException,
                              parser.load_files,
                              [self._fixture('duplicate.yml')])
        self.assertIn("Duplicate definitions for job 'build-app'", str(e))

    def test_missing_name(self):
        parser = YamlParser()
        self.assertRaises(errors.MissingAttributeError, parser.load_files,
                          [self._fixture('no_name.yml')])

    def test_invalid_topmost(self):
        parser = YamlParser()
        self.assertRaises(errors.JenkinsFreestyleException,
                          parser.load_files, [io.StringIO(u"just text\n")])
