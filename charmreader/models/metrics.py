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

"""Juju Metrics pydantic model."""
from typing import Any, Literal

import pydantic
from typing_extensions import Self

from charmreader import const
from charmreader.models.base import DocumentModel

BUILTIN_METRIC_PREFIX = "juju"
BUILTIN_UNITS_METRIC = "juju-units"


class Metric(DocumentModel):
    """A metric the charm collects."""

    type: Literal["gauge", "absolute"] | None = None
    description: pydantic.StrictStr = ""


class Plan(DocumentModel):
    """Whether the charm requires a metering plan."""

    required: pydantic.StrictBool = False


class CharmMetrics(DocumentModel):
    """The metrics.yaml of a charm.

    See also: https://juju.is/docs/sdk/metrics-yaml
    """

    file_name = const.JUJU_METRICS_FILENAME

    metrics: dict[str, Metric] = {}
    plan: Plan | None = None

    @pydantic.field_validator("metrics", mode="before")
    @classmethod
    def _empty_metrics(cls, metrics: Any) -> Any:
        if metrics is None:
            return {}
        if isinstance(metrics, dict):
            return {name: {} if metric is None else metric for name, metric in metrics.items()}
        return metrics

    @pydantic.model_validator(mode="after")
    def _check_metrics(self) -> Self:
        for name, metric in self.metrics.items():
            if name == BUILTIN_UNITS_METRIC:
                if metric.type is not None or metric.description:
                    raise ValueError(
                        f"metric {name!r} is built in: it should not have type or "
                        "description specification"
                    )
                continue
            if name.startswith(BUILTIN_METRIC_PREFIX):
                raise ValueError(f"metric {name!r} is using a prefix reserved for built-in metrics")
            if metric.type is None:
                raise ValueError(f"metric {name!r} lacks a type")
            if not metric.description:
                raise ValueError(f"metric {name!r} lacks a description")
        return self

    @property
    def plan_required(self) -> bool:
        """Whether a plan is needed to deploy the charm."""
        return self.plan is not None and self.plan.required
