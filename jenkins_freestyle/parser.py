#!/usr/bin/env python
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

# Read freestyle job definitions from YAML files

import fnmatch
import io
import logging
import os

import yaml

from jenkins_freestyle.errors import JenkinsFreestyleException
from jenkins_freestyle.errors import MissingAttributeError

__all__ = [
    "YamlParser"
]

logger = logging.getLogger(__name__)


def matches(what, glob_patterns):
    """
    Checks if the given string, ``what``, matches any of the glob patterns in
    the iterable, ``glob_patterns``

    :arg str what: String that we want to test if it matches a pattern
    :arg iterable glob_patterns: glob patterns to match (list, tuple, set,
    etc.)
    """
    return any(fnmatch.fnmatch(what, glob_pattern)
               for glob_pattern in glob_patterns)


class YamlParser(object):
    """Collects job definitions.

    A YAML file holds either a single job mapping or a list of them; each
    mapping has a ``name`` and the job parameters.
    """

    def __init__(self):
        self.jobs = []

    def load_files(self, fn):
        files_to_process = []
        for path in fn:
            if not hasattr(path, 'read') and os.path.isdir(path):
                files_to_process.extend([os.path.join(path, f)
                                         for f in sorted(os.listdir(path))
                                         if (f.endswith('.yml') or
                                             f.endswith('.yaml'))])
            else:
                files_to_process.append(path)

        for in_file in files_to_process:
            if hasattr(in_file, 'read'):
                logger.debug("Parsing YAML from {0}".format(
                    getattr(in_file, 'name', in_file)))
                self._parse_fp(in_file)
            else:
                logger.debug("Parsing YAML file {0}".format(in_file))
                self.parse(in_file)

    def parse(self, fn):
        with io.open(fn, 'r', encoding='utf-8') as fp:
            self._parse_fp(fp)

    def _parse_fp(self, fp):
        data = yaml.safe_load(fp)
        if not data:
            return
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise JenkinsFreestyleException(
                "The topmost collection in file '{fname}' must be a job "
                "mapping or a list of them".format(
                    fname=getattr(fp, 'name', fp)))

        for job in data:
            if not isinstance(job, dict):
                raise JenkinsFreestyleException(
                    "Job definitions must be mappings, got {0!r}".format(job))
            if 'name' not in job:
                raise MissingAttributeError('name')
            self._add_job(job)

    def _add_job(self, job):
        name = job['name']
        for existing in self.jobs:
            if existing['name'] == name:
                raise JenkinsFreestyleException(
                    "Duplicate definitions for job '{0}'".format(name))
        self.jobs.append(job)

    def get_jobs(self, names=None):
        """Return the job definitions, restricted to ``names`` if given.

        :arg list names: glob patterns of job names
        """
        if not names:
            return list(self.jobs)
        return [job for job in self.jobs if matches(job['name'], names)]
