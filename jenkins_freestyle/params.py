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

"""Freestyle job parameters.

A job is described by a flat mapping of parameters.  Any parameter that is
not given takes its default; a parameter that is given is always honoured,
even when it is ``False`` or empty.

:Job Parameters:
    * **keep_dependencies** (`bool`) - default ``false``
    * **block_build_when_downstream_building** (`bool`) - default ``false``
    * **block_build_when_upstream_building** (`bool`) - default ``false``
    * **concurrent_build** (`bool`) - default ``false``
    * **scm_provider** (`str`) - one of ``git``, ``svn`` or ``cvs``
    * **scm_url** (`str`) - remote url, required with ``scm_provider``
    * **scm_module** (`str`) - module to build (cvs only)
    * **scm_branch** (`str`) - branch to build, default ``master``
    * **scm_tag** (`str`) - tag to build (cvs only)
    * **scm_use_head_if_tag_not_found** (`bool`) - cvs only, default
      ``false``
    * **timer** (`str`) - crontab schedule for periodic builds
    * **polling** (`str`) - crontab schedule for polling the SCM
    * **shell_command** (`str`) - command to execute in a shell
    * **assigned_node** (`str`) - restrict the job to a node, by default
      the job may run anywhere
    * **env_inject** (`dict`) - variables injected into the build
      environment, in iteration order
    * **description** (`str`) - job description
    * **disabled** (`bool`) - default ``false``
"""

from collections import namedtuple
from collections import OrderedDict
import logging

from jenkins_freestyle.errors import ValidationError

__all__ = [
    "JobConfig",
    "DEFAULTS",
    "normalize",
]

logger = logging.getLogger(__name__)

# parameter name, record field
PARAMETERS = [
    ('keep_dependencies', 'keep_dependencies'),
    ('block_build_when_downstream_building', 'block_downstream'),
    ('block_build_when_upstream_building', 'block_upstream'),
    ('concurrent_build', 'concurrent_build'),
    ('scm_provider', 'scm_provider'),
    ('scm_url', 'scm_url'),
    ('scm_module', 'scm_module'),
    ('scm_branch', 'scm_branch'),
    ('scm_tag', 'scm_tag'),
    ('scm_use_head_if_tag_not_found', 'scm_use_head_if_tag_not_found'),
    ('timer', 'timer_spec'),
    ('polling', 'poll_spec'),
    ('shell_command', 'shell_command'),
    ('assigned_node', 'assigned_node'),
    ('env_inject', 'env_inject'),
    ('description', 'description'),
    ('disabled', 'disabled'),
]

# scm_branch_given is true when the caller named a branch; cvs falls back to
# scm_tag only when it did not
JobConfig = namedtuple(
    'JobConfig', [field for _, field in PARAMETERS] + ['scm_branch_given'])

DEFAULTS = {
    'keep_dependencies': False,
    'block_build_when_downstream_building': False,
    'block_build_when_upstream_building': False,
    'concurrent_build': False,
    'scm_provider': None,
    'scm_url': None,
    'scm_module': None,
    'scm_branch': 'master',
    'scm_tag': None,
    'scm_use_head_if_tag_not_found': False,
    'timer': None,
    'polling': None,
    'shell_command': None,
    'assigned_node': {},
    'env_inject': {},
    'description': None,
    'disabled': False,
}


def _env_pairs(env_inject):
    # a mapping keeps its own iteration order, a sequence of pairs is taken
    # as given
    if not env_inject:
        return ()
    if hasattr(env_inject, 'items'):
        return tuple(env_inject.items())
    if not isinstance(env_inject, (list, tuple)):
        logger.debug("Ignoring env_inject of type %s",
                     type(env_inject).__name__)
        return ()

    pairs = []
    for pair in env_inject:
        if isinstance(pair, (list, tuple)) and len(pair) == 2:
            pairs.append(tuple(pair))
        else:
            logger.debug("Ignoring malformed env_inject entry %r", pair)
    return tuple(pairs)


def normalize(params_in=None):
    """Merge ``params_in`` over :data:`DEFAULTS` into a :class:`JobConfig`.

    :arg dict params_in: caller supplied parameters, may be partial
    :raises ValidationError: if an SCM provider is named without a URL
    :rtype: JobConfig
    """
    if params_in is None:
        params_in = {}

    if params_in.get('scm_provider') and not params_in.get('scm_url'):
        raise ValidationError('SCM provider URL must be specified')

    params = dict(DEFAULTS)
    for key, value in params_in.items():
        if key not in DEFAULTS:
            logger.debug("Ignoring unknown job parameter '%s'", key)
            continue
        params[key] = value

    params['env_inject'] = OrderedDict(_env_pairs(params['env_inject']))

    fields = dict((field, params[key]) for key, field in PARAMETERS)
    fields['scm_branch_given'] = bool(params_in.get('scm_branch'))

    return JobConfig(**fields)
