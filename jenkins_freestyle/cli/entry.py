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
import os
import platform
import sys

from stevedore import extension

from jenkins_freestyle.cli.parser import create_parser
from jenkins_freestyle.config import FreestyleConfig

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger()


class FreestyleJobs(object):
    """ This is the entry point class for the `jenkins-freestyle` command line
    tool.  Python scripts may pass `jenkins-freestyle` args directly to this
    class instead of running the tool in a subprocess.
    """

    def __init__(self, args=None, **kwargs):
        if args is None:
            args = []
        self.parser = create_parser()
        self.options = self.parser.parse_args(args)

        self.config = FreestyleConfig(self.options.conf,
                                      config_section=self.options.section,
                                      **kwargs)

        if not self.options.command:
            self.parser.error("Must specify a 'command' to be performed")

        if (self.options.log_level is not None):
            self.options.log_level = getattr(logging,
                                             self.options.log_level.upper(),
                                             logger.getEffectiveLevel())
            logger.setLevel(self.options.log_level)

        self._parse_additional()
        self.config.validate()

    def _set_config(self, target, option):
        """
        Sets the option in target only if the given option was explicitly set
        """
        opt_val = getattr(self.options, option, None)
        if opt_val is not None:
            target[option] = opt_val

    def _parse_additional(self):

        self._set_config(self.config.jenkins, 'user')
        self._set_config(self.config.jenkins, 'password')

        if getattr(self.options, 'path', None):
            if hasattr(self.options.path, 'read'):
                logger.debug("Input file is stdin")
                if self.options.path.isatty():
                    if platform.system() == 'Windows':
                        key = 'CTRL+Z'
                    else:
                        key = 'CTRL+D'
                    logger.warning("Reading configuration from STDIN. "
                                   "Press %s to end input.", key)
                self.options.path = [self.options.path]
            else:
                # take list of paths
                self.options.path = self.options.path.split(os.pathsep)

    def execute(self):

        extension_manager = extension.ExtensionManager(
            namespace='jenkins_freestyle.cli.subcommands',
            invoke_on_load=True,)

        ext = extension_manager[self.options.command]
        ext.obj.execute(self.options, self.config)


def main():
    argv = sys.argv[1:]
    jobs = FreestyleJobs(argv)
    jobs.execute()


if __name__ == "__main__":
    main()
