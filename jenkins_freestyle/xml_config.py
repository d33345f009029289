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

# Manage Jenkins XML config file output.

import hashlib
import logging
from xml.dom import minidom
import xml.etree.ElementTree as XML

from jenkins_freestyle import errors
from jenkins_freestyle.modules.project_freestyle import Freestyle
from jenkins_freestyle import params

__all__ = [
    "XmlJobGenerator",
    "XmlJob"
]

logger = logging.getLogger(__name__)


class XmlJob(object):
    def __init__(self, document, name):
        self.document = document
        self.name = name

    @property
    def xml(self):
        return self.document.to_xml()

    def md5(self):
        return hashlib.md5(self.output()).hexdigest()

    def output(self):
        out = minidom.parseString(XML.tostring(self.xml, encoding='UTF-8'))
        return out.toprettyxml(indent='  ', encoding='utf-8')


class XmlJobGenerator(object):
    """ This class is responsible for generating Jenkins Configuration XML for
    freestyle jobs from their flat job parameters.
    """

    def __init__(self):
        self.project = Freestyle()

    def build_document(self, job_params):
        """Normalize ``job_params`` and assemble the job document tree.

        :raises ValidationError: when the parameters are inconsistent, no
            document is built in that case
        """
        config = params.normalize(job_params)
        return self.project.root_node(config)

    def generate(self, name, job_params):
        document = self.build_document(job_params)
        logger.debug("Generated XML for job '%s'", name)
        return XmlJob(document, name)

    def generateXML(self, data_list):
        xml_objs = []
        for data in data_list:
            if 'name' not in data:
                raise errors.MissingAttributeError('name')
            job_params = dict((key, value) for key, value in data.items()
                              if key != 'name')
            xml_objs.append(self.generate(data['name'], job_params))
        return xml_objs
