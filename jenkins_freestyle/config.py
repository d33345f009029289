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

# Manage configuration sources, defaults, and access.

from collections import defaultdict
import configparser
import io
import logging
import os

from jenkins_freestyle.errors import FreestyleConfigException

__all__ = [
    "FreestyleConfig"
]

logger = logging.getLogger(__name__)

DEFAULT_CONF = """
[job_builder]
print_job_urls=False

# other named sections could be used in addition to the implicit [jenkins]
# if you have multiple jenkins servers.
[jenkins]
url=http://localhost:8080/
"""

CONFIG_REQUIRED_MESSAGE = ("A valid configuration file is required. "
                           "No configuration file passed.")

#: Passed to python-jenkins when no timeout is configured so that its own
#: default applies.
DEFAULT_TIMEOUT = object()


class FreestyleConfig(object):

    def __init__(self, config_filename=None,
                 config_file_required=False,
                 config_section='jenkins'):
        """
        The FreestyleConfig class resolves priority between the built-in
        defaults and a configuration file, and exposes the result through
        the ``jenkins`` and ``builder`` dictionaries.

        :arg str config_filename: Name of configuration file on which to base
            this config object.
        :arg bool config_file_required: Whether failure to read the
            configuration file raises an exception or only logs a warning
            and carries on with the default values.
        :arg str config_section: Section holding the Jenkins server
            settings.
        """

        config_parser = self._init_defaults()

        global_conf = '/etc/jenkins_freestyle/jenkins_freestyle.ini'
        user_conf = os.path.join(os.path.expanduser('~'), '.config',
                                 'jenkins_freestyle', 'jenkins_freestyle.ini')
        if config_filename is not None:
            conf = config_filename
        elif os.path.isfile(user_conf):
            conf = user_conf
        else:
            conf = global_conf

        config_fp = None
        try:
            config_fp = self._read_config_file(conf)
        except FreestyleConfigException:
            if config_file_required:
                raise FreestyleConfigException(CONFIG_REQUIRED_MESSAGE)
            else:
                logger.warning("Config file, {0}, not found. Using "
                               "default config values.".format(conf))

        if config_fp is not None:
            with config_fp:
                config_parser.read_file(config_fp)

        self.config_parser = config_parser
        self._section = config_section

        self.jenkins = defaultdict(None)
        self.builder = defaultdict(None)

        self._setup()

    def _init_defaults(self):
        """ Initialize default configuration values using DEFAULT_CONF
        """
        config = configparser.ConfigParser()
        config.read_string(DEFAULT_CONF)
        return config

    def _read_config_file(self, config_filename):
        """ Given path to configuration file, open it for reading.
        """
        if os.path.isfile(config_filename):
            logger.debug("Reading config from {0}".format(config_filename))
            config_fp = io.open(config_filename, 'r', encoding='utf-8')
        else:
            raise FreestyleConfigException(
                "A valid configuration file is required. "
                "\n{0} is not valid.".format(config_filename))

        return config_fp

    def _setup(self):
        config = self.config_parser

        if not config.has_section(self._section):
            raise FreestyleConfigException(
                "Jenkins server section [{0}] not found in "
                "configuration".format(self._section))

        print_job_urls = False
        if config.has_option('job_builder', 'print_job_urls'):
            print_job_urls = config.getboolean('job_builder',
                                               'print_job_urls')
        self.builder['print_job_urls'] = print_job_urls

        # Jenkins supports access as an anonymous user, to enable must pass
        # 'None' as the value for user and password to python-jenkins
        try:
            user = config.get(self._section, 'user')
        except configparser.NoOptionError:
            user = None
        self.jenkins['user'] = user

        try:
            password = config.get(self._section, 'password')
        except configparser.NoOptionError:
            password = None
        self.jenkins['password'] = password

        # to retain the python-jenkins default must not set timeout at all
        try:
            timeout = config.getfloat(self._section, 'timeout')
        except ValueError:
            raise FreestyleConfigException(
                "Jenkins timeout config is invalid")
        except configparser.NoOptionError:
            timeout = DEFAULT_TIMEOUT
        self.jenkins['timeout'] = timeout

        try:
            url = config.get(self._section, 'url')
        except configparser.NoOptionError:
            raise FreestyleConfigException(
                "No Jenkins url set in the [{0}] section".format(
                    self._section))
        self.jenkins['url'] = url.rstrip('/')

    def validate(self):
        # Inform the user as to what is likely to happen
        if self.jenkins['user'] is None and self.jenkins['password'] is None:
            logger.info("Will use anonymous access to Jenkins if needed.")
        elif ((self.jenkins['user'] is not None and
               self.jenkins['password'] is None) or
              (self.jenkins['user'] is None and
               self.jenkins['password'] is not None)):
            raise FreestyleConfigException(
                "Cannot authenticate to Jenkins with only one of User and "
                "Password provided, please check your configuration."
            )
