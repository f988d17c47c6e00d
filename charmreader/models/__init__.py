# Copyright 2024 Canonical Ltd.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# For further info, check https://github.com/canonical/charmreader
"""Models for the documents inside a charm."""

from charmreader.models.actions import ActionSpec, JujuActions
from charmreader.models.base import DocumentModel
from charmreader.models.config import (
    JujuBooleanOption,
    JujuConfig,
    JujuFloatOption,
    JujuIntOption,
    JujuSecretOption,
    JujuStringOption,
)
from charmreader.models.lxd_profile import LXDProfile
from charmreader.models.manifest import Manifest
from charmreader.models.metadata import CharmMeta, Relation
from charmreader.models.metrics import CharmMetrics, Metric, Plan
from charmreader.models.platform import Base, Channel
from charmreader.models.resource import ResourceMeta, parse_resource

__all__ = [
    "ActionSpec",
    "JujuActions",
    "DocumentModel",
    "JujuBooleanOption",
    "JujuConfig",
    "JujuFloatOption",
    "JujuIntOption",
    "JujuSecretOption",
    "JujuStringOption",
    "LXDProfile",
    "Manifest",
    "CharmMeta",
    "Relation",
    "CharmMetrics",
    "Metric",
    "Plan",
    "Base",
    "Channel",
    "ResourceMeta",
    "parse_resource",
]
