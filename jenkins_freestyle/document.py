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

"""Node types for the job document tree.

A job document is an ordered tree.  Every node is one of:

* :class:`Attribute` - a type-tag attribute (``class="hudson.scm.NullSCM"``)
  carried by the enclosing element,
* :class:`Scalar` - an element holding a single value,
* :class:`Empty` - an element with no content,
* :class:`Element` - an element holding an ordered list of child nodes.

Jenkins reads ``config.xml`` positionally, so child order is kept exactly as
given.  Attributes must come before any other child of an :class:`Element`.
"""

from collections import OrderedDict
import xml.etree.ElementTree as XML

from jenkins_freestyle.errors import DocumentError

__all__ = [
    "Attribute",
    "Scalar",
    "Empty",
    "Element",
]


class Attribute(object):
    def __init__(self, name, value):
        self.name = name
        self.value = value

    def __eq__(self, other):
        return (isinstance(other, Attribute) and
                (self.name, self.value) == (other.name, other.value))

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "Attribute({0!r}, {1!r})".format(self.name, self.value)


class Scalar(object):
    def __init__(self, tag, value):
        if value is None:
            raise DocumentError(
                "Scalar '{0}' requires a value, use Empty instead".format(tag))
        self.tag = tag
        self.value = value

    @property
    def text(self):
        if isinstance(self.value, bool):
            return str(self.value).lower()
        return str(self.value)

    def to_xml(self, xml_parent):
        XML.SubElement(xml_parent, self.tag).text = self.text

    def __eq__(self, other):
        return (isinstance(other, Scalar) and
                (self.tag, self.value) == (other.tag, other.value))

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "Scalar({0!r}, {1!r})".format(self.tag, self.value)


class Empty(object):
    def __init__(self, tag):
        self.tag = tag

    def to_xml(self, xml_parent):
        XML.SubElement(xml_parent, self.tag)

    def __eq__(self, other):
        return isinstance(other, Empty) and self.tag == other.tag

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "Empty({0!r})".format(self.tag)


class Element(object):
    """An element with ordered children.

    :arg str tag: element name
    :arg list children: :class:`Attribute` nodes first, followed by any
        mix of :class:`Scalar`, :class:`Empty` and :class:`Element` nodes
    """

    def __init__(self, tag, children=None):
        self.tag = tag
        self.attributes = OrderedDict()
        self.children = []

        for node in children or []:
            if isinstance(node, Attribute):
                if self.children:
                    raise DocumentError(
                        "Attribute '{0}' of '{1}' must precede child "
                        "elements".format(node.name, tag))
                if node.name in self.attributes:
                    raise DocumentError(
                        "Duplicate attribute '{0}' on '{1}'".format(
                            node.name, tag))
                self.attributes[node.name] = node.value
            elif isinstance(node, (Scalar, Empty, Element)):
                self.children.append(node)
            else:
                raise DocumentError(
                    "Unsupported node {0!r} in '{1}'".format(node, tag))

    def find(self, tag):
        for child in self.children:
            if child.tag == tag:
                return child
        return None

    def to_xml(self, xml_parent=None):
        if xml_parent is None:
            xml = XML.Element(self.tag, self.attributes)
        else:
            xml = XML.SubElement(xml_parent, self.tag, self.attributes)
        for child in self.children:
            child.to_xml(xml)
        return xml

    def __len__(self):
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    def __eq__(self, other):
        return (isinstance(other, Element) and
                self.tag == other.tag and
                self.attributes == other.attributes and
                self.children == other.children)

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "Element({0!r}, {1!r}, {2!r})".format(
            self.tag, dict(self.attributes), self.children)
