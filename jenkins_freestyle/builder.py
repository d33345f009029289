#!/usr/bin/env python
# Copyright (C) 2012 OpenStack, LLC.
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

# Manage freestyle jobs in Jenkins server

import errno
import hashlib
import io
import logging
import os
from urllib.parse import quote

import jenkins

from jenkins_freestyle.config import DEFAULT_TIMEOUT
from jenkins_freestyle.errors import JenkinsFreestyleException
from jenkins_freestyle.xml_config import XmlJobGenerator

__all__ = [
    "JenkinsManager"
]

logger = logging.getLogger(__name__)


class JenkinsManager(object):

    def __init__(self, config):
        url = config.jenkins['url']
        user = config.jenkins['user']
        password = config.jenkins['password']
        timeout = config.jenkins['timeout']

        if timeout != DEFAULT_TIMEOUT:
            self.jenkins = jenkins.Jenkins(url, user, password, timeout)
        else:
            self.jenkins = jenkins.Jenkins(url, user, password)

        self.generator = XmlJobGenerator()
        self._config = config

    def _job_format(self, job_name):
        # returns job name or url based on config option
        if self._config.builder['print_job_urls']:
            return self._config.jenkins['url'] + \
                '/job/' + quote(
                    '/job/'.join(job_name.split('/')).encode('utf8')) + '/'
        else:
            return job_name

    def is_job(self, job_name):
        return self.jenkins.job_exists(job_name)

    def get_job_md5(self, job_name):
        xml = self.jenkins.get_job_config(job_name)
        return hashlib.md5(xml.encode('utf-8')).hexdigest()

    def create_freestyle(self, job_name, job_params):
        """Create a new freestyle job from its parameters.

        The XML is generated before Jenkins is contacted, so invalid
        parameters never reach the server.
        """
        xml_job = self.generator.generate(job_name, job_params)

        if self.is_job(job_name):
            raise JenkinsFreestyleException(
                'job "{0}" already exists'.format(job_name))

        logger.info("Creating jenkins job {0}".format(
            self._job_format(job_name)))
        self.jenkins.create_job(job_name, xml_job.output().decode('utf-8'))

        if not self.is_job(job_name):
            raise JenkinsFreestyleException(
                'create "{0}" failed'.format(job_name))
        return xml_job

    def reconfig_freestyle(self, job_name, job_params):
        """Replace the configuration of an existing freestyle job."""
        xml_job = self.generator.generate(job_name, job_params)

        if not self.is_job(job_name):
            raise JenkinsFreestyleException(
                'job "{0}" does not exist'.format(job_name))

        logger.info("Reconfiguring jenkins job {0}".format(
            self._job_format(job_name)))
        self.jenkins.reconfig_job(job_name, xml_job.output().decode('utf-8'))
        return xml_job

    def update_job(self, job_name, xml):
        if self.is_job(job_name):
            logger.info("Reconfiguring jenkins job {0}".format(
                self._job_format(job_name)))
            self.jenkins.reconfig_job(job_name, xml)
        else:
            logger.info("Creating jenkins job {0}".format(
                self._job_format(job_name)))
            self.jenkins.create_job(job_name, xml)

    def _setup_output(self, output, job_name):
        output_fn = os.path.join(output, os.path.normpath(job_name))
        output_dir = os.path.dirname(output_fn)

        if output_dir != output:
            logger.debug("Creating directory %s" % output_dir)
            try:
                os.makedirs(output_dir)
            except OSError:
                if not os.path.isdir(output_dir):
                    raise

        return output_fn

    def update_jobs(self, xml_jobs, output=None):
        logger.info("Number of jobs generated:  %d", len(xml_jobs))
        xml_jobs = sorted(xml_jobs, key=lambda job: job.name)

        if output:
            if not hasattr(output, 'write') and not os.path.isdir(output):
                logger.debug("Creating directory %s" % output)
                try:
                    os.makedirs(output)
                except OSError:
                    if not os.path.isdir(output):
                        raise

            for job in xml_jobs:
                if hasattr(output, 'write'):
                    # `output` is a file-like object
                    logger.info("Job name:  %s", job.name)
                    logger.debug("Writing XML to '{0}'".format(output))
                    try:
                        output.write(job.output().decode('utf-8'))
                    except IOError as exc:
                        if exc.errno == errno.EPIPE:
                            # EPIPE could happen if piping output to something
                            # that doesn't read the whole input (e.g.: the UNIX
                            # `head` command)
                            return xml_jobs, len(xml_jobs)
                        raise
                    continue

                output_fn = self._setup_output(output, job.name)

                logger.debug("Writing XML to '{0}'".format(output_fn))
                with io.open(output_fn, 'w', encoding='utf-8') as f:
                    f.write(job.output().decode('utf-8'))
            return xml_jobs, len(xml_jobs)

        for job in xml_jobs:
            self.update_job(job.name, job.output().decode('utf-8'))
        return xml_jobs, len(xml_jobs)
