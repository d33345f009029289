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

import argparse
import os

from stevedore import extension

from jenkins_freestyle import version


def __version__():
    return "Jenkins Freestyle version: %s" % version.version_string()


def create_parser():
    """ Create an ArgumentParser object usable by FreestyleJobs.
    """
    parser = argparse.ArgumentParser()
    parser.add_argument(
        '--conf',
        dest='conf',
        default=os.environ.get('JENKINS_FREESTYLE_CONF', None),
        help="configuration file [JENKINS_FREESTYLE_CONF]")
    parser.add_argument(
        '-l',
        '--log_level',
        dest='log_level',
        default=os.environ.get('JENKINS_FREESTYLE_LOG_LEVEL', 'info'),
        help="log level (default: %(default)s) [JENKINS_FREESTYLE_LOG_LEVEL]")
    parser.add_argument(
        '--version',
        dest='version',
        action='version',
        version=__version__(),
        help="show version")
    parser.add_argument(
        '--server', '-s',
        dest='section',
        default=os.environ.get('JENKINS_FREESTYLE_SECTION', 'jenkins'),
        help="The Jenkins server ini section to use. Defaults to 'jenkins' "
        "[JENKINS_FREESTYLE_SECTION]")
    parser.add_argument(
        '--user', '-u',
        default=os.environ.get('JENKINS_FREESTYLE_USER', None),
        help="The Jenkins user to use for authentication. This overrides "
        "the user specified in the configuration file. "
        "[JENKINS_FREESTYLE_USER]")
    parser.add_argument(
        '--password', '-p',
        default=os.environ.get('JENKINS_FREESTYLE_PASSWORD', None),
        help="Password or API token to use for authenticating towards Jenkins."
        " This overrides the password specified in the configuration file."
        " [JENKINS_FREESTYLE_PASSWORD]")

    subparser = parser.add_subparsers(
        dest='command',
        help="update or test job")

    extension_manager = extension.ExtensionManager(
        namespace='jenkins_freestyle.cli.subcommands',
        invoke_on_load=True,
    )

    def parse_subcommand_args(ext, subparser):
        ext.obj.parse_args(subparser)

    extension_manager.map(parse_subcommand_args, subparser)

    return parser
