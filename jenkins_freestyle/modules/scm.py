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


"""
The SCM module builds the ``scm`` section of the job from the
``scm_provider`` parameter.  Exactly one SCM is produced per job:

* no provider: ``hudson.scm.NullSCM``
* ``git``: :func:`git`
* ``svn``: :func:`svn`
* ``cvs``: :func:`cvs`

Any other provider value is treated as no provider.

Example::

  - name: test_job
    scm_provider: git
    scm_url: https://example.com/repo.git
    scm_branch: stable
"""

import logging

from jenkins_freestyle.document import Attribute
from jenkins_freestyle.document import Element
import jenkins_freestyle.modules.base
import jenkins_freestyle.modules.helpers as helpers

logger = logging.getLogger(__name__)


def null_scm(config):
    """No source control."""
    return [Attribute('class', 'hudson.scm.NullSCM')]


def git(config):
    """Git repository, requires the Jenkins Git Plugin.

    A single remote named by ``scm_url`` is fetched and ``scm_branch`` is
    built.  Every other plugin setting keeps the value Jenkins uses for a
    newly created job.
    """
    remote = Element('hudson.plugins.git.UserRemoteConfig',
                     helpers.convert_mapping_to_nodes([
                         ('name', None),
                         ('refspec', None),
                         ('url', config.scm_url),
                     ]))
    branch = Element('hudson.plugins.git.BranchSpec', [
        helpers.scalar_or_empty('name', config.scm_branch),
    ])

    mapping = [
        # xml name, value
        ('configVersion', '2'),
        ('userRemoteConfigs', Element('userRemoteConfigs', [remote])),
        ('branches', Element('branches', [branch])),
        ('disableSubmodules', False),
        ('recursiveSubmodules', True),
        ('doGenerateSubmoduleConfigurations', False),
        ('authorOrCommitter', False),
        ('clean', False),
        ('wipeOutWorkspace', False),
        ('pruneBranches', False),
        ('remotePoll', False),
        ('ignoreNotifyCommit', False),
        ('useShallowClone', False),
        ('buildChooser', helpers.typed_element(
            'buildChooser', 'hudson.plugins.git.util.DefaultBuildChooser')),
        ('gitTool', 'Default'),
        ('submoduleCfg', helpers.typed_element('submoduleCfg', 'list')),
        ('relativeTargetDir', None),
        ('reference', None),
        ('includedRegions', None),
        ('excludedRegions', None),
        ('excludedUsers', None),
        ('gitConfigName', None),
        ('gitConfigEmail', None),
        ('skipTag', False),
        ('scmName', None),
    ]
    return ([Attribute('class', 'hudson.plugins.git.GitSCM')] +
            helpers.convert_mapping_to_nodes(mapping))


def svn(config):
    """Subversion repository, checked out into the workspace root."""
    location = Element('hudson.scm.SubversionSCM_-ModuleLocation',
                       helpers.convert_mapping_to_nodes([
                           ('remote', config.scm_url),
                           ('local', '.'),
                       ]))

    mapping = [
        ('locations', Element('locations', [location])),
        ('includedRegions', None),
        ('excludedRegions', None),
        ('excludedUsers', None),
        ('excludedRevprop', None),
        ('excludedCommitMessages', None),
        ('workspaceUpdater', helpers.typed_element(
            'workspaceUpdater', 'hudson.scm.subversion.UpdateUpdater')),
    ]
    return ([Attribute('class', 'hudson.scm.SubversionSCM')] +
            helpers.convert_mapping_to_nodes(mapping))


def cvs(config):
    """CVS repository, requires the Jenkins CVS Plugin 1.6.

    ``scm_branch`` is checked out when the caller named one, otherwise
    ``scm_tag`` if given.  ``isTag`` is set whenever a tag is given.
    """
    if config.scm_branch_given or config.scm_tag is None:
        branch = config.scm_branch
    else:
        branch = config.scm_tag

    mapping = [
        ('cvsroot', config.scm_url),
        ('module', config.scm_module),
        ('branch', branch),
        ('canUseUpdate', True),
        ('useHeadIfNotFound', config.scm_use_head_if_tag_not_found),
        ('flatten', True),
        ('isTag', config.scm_tag is not None),
        ('excludedRegions', None),
    ]
    return ([Attribute('class', 'hudson.scm.CVSSCM'),
             Attribute('plugin', 'cvs@1.6')] +
            helpers.convert_mapping_to_nodes(mapping))


class SCM(jenkins_freestyle.modules.base.Base):

    component_type = 'scm'
    tag = 'scm'

    variants = {
        'git': git,
        'svn': svn,
        'cvs': cvs,
    }

    def gen_nodes(self, config):
        provider = config.scm_provider
        if not provider:
            return null_scm(config)

        variant = None
        if isinstance(provider, str):
            variant = self.variants.get(provider)
        if variant is None:
            logger.debug("Unknown scm provider '%s', using NullSCM",
                         provider)
            return null_scm(config)

        return variant(config)
