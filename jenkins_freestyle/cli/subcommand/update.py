#!/usr/bin/env python
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

import logging
import sys
import time

from jenkins_freestyle.builder import JenkinsManager
from jenkins_freestyle.parser import YamlParser
from jenkins_freestyle.xml_config import XmlJobGenerator
import jenkins_freestyle.cli.subcommand.base as base


logger = logging.getLogger(__name__)


class UpdateSubCommand(base.BaseSubCommand):

    def parse_arg_path(self, parser):
        parser.add_argument(
            'path',
            nargs='?',
            default=sys.stdin,
            help="colon-separated list of paths to YAML files "
            "or directories")

    def parse_arg_names(self, parser):
        parser.add_argument(
            'names',
            help='name(s) of job(s)', nargs='*')

    def parse_args(self, subparser):
        update = subparser.add_parser('update')

        self.parse_arg_path(update)
        self.parse_arg_names(update)

    def _generate_xmljobs(self, options, config=None):
        builder = JenkinsManager(config)

        logger.info("Updating jobs in {0} ({1})".format(
            options.path, options.names))
        orig = time.time()

        # Generate XML
        parser = YamlParser()
        parser.load_files(options.path)
        job_data_list = parser.get_jobs(options.names)

        xml_jobs = XmlJobGenerator().generateXML(job_data_list)

        step = time.time()
        logging.debug('%d XML files generated in %ss',
                      len(xml_jobs), str(step - orig))

        return builder, xml_jobs

    def execute(self, options, config):
        builder, xml_jobs = self._generate_xmljobs(options, config)

        jobs, num_updated_jobs = builder.update_jobs(xml_jobs)
        logger.info("Number of jobs updated: %d", num_updated_jobs)
