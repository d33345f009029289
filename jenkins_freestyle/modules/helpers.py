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

from jenkins_freestyle.document import Attribute
from jenkins_freestyle.document import Element
from jenkins_freestyle.document import Empty
from jenkins_freestyle.document import Scalar


def scalar_or_empty(tag, value):
    """Scalar node for ``value``, or an empty element when it is ``None``."""
    if value is None:
        return Empty(tag)
    return Scalar(tag, value)


def typed_element(tag, class_name, children=None):
    """Element tagged with a ``class`` attribute naming its implementation.
    """
    return Element(tag, [Attribute('class', class_name)] + list(children or []))


def convert_mapping_to_nodes(mapping):
    """Convert a mapping to document nodes

    Each entry of ``mapping`` is a ``(tag, value)`` tuple.  A value of
    ``None`` produces an empty element, a node is passed through untouched
    and any other value becomes a scalar.
    """
    nodes = []
    for tag, value in mapping:
        if isinstance(value, (Element, Empty, Scalar)):
            nodes.append(value)
        else:
            nodes.append(scalar_or_empty(tag, value))
    return nodes
